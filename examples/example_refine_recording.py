"""
Recording Refinement Examples for Protégé

USAGE:
    python examples/example_refine_recording.py

Feeds a simulated teach-mode session (raw UI events, including mistakes and
keyboard mashing) through the refiner and prints what was learned.
"""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from protege.recording import ActionNormalizer
from protege.refinement import RecordingRefiner


# What the demo workspace emits while the user teaches
DEMO_SESSION = [
    {"type": "toggle", "target": "task-1", "value": True, "timestamp": 1},
    {"type": "toggle", "target": "task-2", "value": True, "timestamp": 2},
    {"type": "toggle", "target": "task-2", "value": False, "timestamp": 3},
    {"type": "input", "target": "email", "value": "asdkjqwxmz", "timestamp": 4},
    {"type": "input", "target": "email", "value": "user@example.com", "timestamp": 5},
    {"type": "input", "target": "prospectName", "value": "Hey jkhqwz Sarah please", "timestamp": 6},
    {"type": "input", "target": "customMessage", "value": "Hi Sarah we would love you to join our", "timestamp": 7},
    {"type": "click", "target": "send", "timestamp": 8},
]


def example_refine_session():
    """Example: Refine a noisy teaching session"""
    print("\n" + "="*80)
    print("Refinement Example: Noisy Teaching Session")
    print("="*80 + "\n")

    recorded_actions = ActionNormalizer().normalize(DEMO_SESSION)

    report = RecordingRefiner().refine_with_report(recorded_actions)
    report.print_summary()

    if report.refined_script:
        print(f"✓ Task learned with {report.refined_count} actions: {report.description}")
    else:
        print("✗ Nothing meaningful was learned from this session")


if __name__ == '__main__':
    example_refine_session()
