"""
Demonstration Recording Module

Data model for teach-mode recordings and conversion of raw UI events into it.

Components:
- schemas: RecordedAction, TerminalState and RefinementReport models
- action_normalizer: Converts raw UI event dicts to RecordedAction objects
"""

from .schemas import ActionKind, RecordedAction, TerminalState, RefinementReport
from .action_normalizer import ActionNormalizer

__all__ = [
    'ActionKind',
    'RecordedAction',
    'TerminalState',
    'RefinementReport',
    'ActionNormalizer',
]
