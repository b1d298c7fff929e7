"""
Backward Tracing

Maps causal necessity: traces back from the deduced goal and keeps, per goal
target, the single action whose effect matches the terminal value.
"""

from typing import Dict, List, Optional, Sequence

from protege.config import ProtegeConfig, get_config
from protege.recording.schemas import ActionKind, RecordedAction, TerminalState
from protege.text_quality.text_filter import filter_text


def is_consistent_with_goal(action: RecordedAction, goal: TerminalState, config: ProtegeConfig) -> bool:
    """
    Check whether an action produces the goal's value for its target

    Toggles match when they complete a goal task; inputs match when their
    filtered value equals the goal's field value.
    """
    if action.kind == ActionKind.TOGGLE:
        return action.value is True and action.target in goal.completed_targets

    if action.kind == ActionKind.INPUT and isinstance(action.value, str):
        expected = goal.field_values.get(action.target)
        return expected is not None and filter_text(action.value, action.target, config) == expected

    return False


def trace_backward(
    actions: Sequence[RecordedAction],
    goal: TerminalState,
    config: Optional[ProtegeConfig] = None
) -> List[RecordedAction]:
    """
    Find the actions causally required to reach the goal

    For each necessary target the consistent action with the greatest timestamp
    is kept. When two inputs filter to the same goal value, the later one wins.

    Args:
        actions: Raw action log
        goal: Terminal state deduced from the same log
        config: Thresholds (defaults to the environment configuration)

    Returns:
        Keep-list with at most one action per target, in chronological order
    """
    config = config or get_config()
    necessary_targets = goal.necessary_targets()

    last_consistent: Dict[str, RecordedAction] = {}
    for action in actions:
        if action.target not in necessary_targets or not action.carries_valid_value():
            continue

        existing = last_consistent.get(action.target)
        if existing is not None and action.timestamp <= existing.timestamp:
            continue

        if is_consistent_with_goal(action, goal, config):
            last_consistent[action.target] = action

    return sorted(last_consistent.values(), key=lambda action: action.timestamp)
