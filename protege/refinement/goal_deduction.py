"""
Goal Deduction

Identifies the user's intention by collapsing a raw action log into its terminal
state: which tasks ended up completed and what each form field finally holds.
"""

from typing import Dict, Optional, Sequence

from protege.config import ProtegeConfig, get_config
from protege.recording.schemas import RecordedAction, TerminalState
from protege.text_quality.text_filter import filter_text


def latest_action_per_target(actions: Sequence[RecordedAction]) -> Dict[str, RecordedAction]:
    """
    Most recent value-bearing action for every target

    Clicks and malformed actions are ignored. On equal timestamps the action seen
    first in the log is kept.

    Args:
        actions: Recorded actions in capture order

    Returns:
        Dict mapping target → latest action
    """
    latest: Dict[str, RecordedAction] = {}
    for action in actions:
        if not action.carries_valid_value():
            continue

        existing = latest.get(action.target)
        if existing is None or action.timestamp > existing.timestamp:
            latest[action.target] = action

    return latest


def is_task_target(target: str, config: ProtegeConfig) -> bool:
    return target.startswith(config.task_target_prefix)


def deduce_goal(actions: Sequence[RecordedAction], config: Optional[ProtegeConfig] = None) -> TerminalState:
    """
    Determine the terminal success state of a teaching session

    Args:
        actions: Raw action log
        config: Thresholds (defaults to the environment configuration)

    Returns:
        TerminalState with completed task targets and filtered field values
    """
    config = config or get_config()

    completed = set()
    field_values: Dict[str, str] = {}

    for target, action in latest_action_per_target(actions).items():
        if action.value is True:
            # Only positive completions of task-like controls form part of the goal
            if is_task_target(target, config):
                completed.add(target)

        elif isinstance(action.value, str) and action.value.strip():
            filtered = filter_text(action.value, target, config)
            if filtered.strip():
                field_values[target] = filtered

    return TerminalState(completed_targets=frozenset(completed), field_values=field_values)
