"""
Protégé: automation by demonstration

Observes a task once, refines away mistakes and noise, and keeps a minimal
script that reproduces the user's goal.
"""

from .config import ProtegeConfig, get_config, reset_config
from .recording import ActionKind, RecordedAction, TerminalState, RefinementReport, ActionNormalizer
from .text_quality import filter_text, classify_field, FieldType
from .refinement import (
    deduce_goal,
    trace_backward,
    prune_noise,
    RecordingRefiner,
    process_recording,
    describe_task,
)

__all__ = [
    'ProtegeConfig',
    'get_config',
    'reset_config',
    'ActionKind',
    'RecordedAction',
    'TerminalState',
    'RefinementReport',
    'ActionNormalizer',
    'filter_text',
    'classify_field',
    'FieldType',
    'deduce_goal',
    'trace_backward',
    'prune_noise',
    'RecordingRefiner',
    'process_recording',
    'describe_task',
]
