"""
Recording Refinement Module

Turns a raw teach-mode recording into a minimal script that reproduces the
user's goal.

Components:
- goal_deduction: Derives the terminal state (completed tasks, final field values)
- backward_tracing: Keeps the one action per target that produced the terminal state
- noise_pruning: Drops everything else and cleans kept input values
- recording_refiner: Orchestrates the three stages
- task_describer: Human-readable summaries of a refined script
"""

from .goal_deduction import deduce_goal
from .backward_tracing import trace_backward
from .noise_pruning import prune_noise
from .recording_refiner import RecordingRefiner, process_recording
from .task_describer import describe_task, summarize_actions

__all__ = [
    'deduce_goal',
    'trace_backward',
    'prune_noise',
    'RecordingRefiner',
    'process_recording',
    'describe_task',
    'summarize_actions',
]
