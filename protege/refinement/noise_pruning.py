"""
Noise Pruning

Removes every recorded action that did not contribute to the final success and
cleans the values of the ones that did.
"""

from typing import Dict, List, Optional, Sequence

from protege.config import ProtegeConfig, get_config
from protege.recording.schemas import ActionKind, RecordedAction
from protege.text_quality.text_filter import filter_text


def prune_noise(
    raw_log: Sequence[RecordedAction],
    keep_list: Sequence[RecordedAction],
    config: Optional[ProtegeConfig] = None
) -> List[RecordedAction]:
    """
    Reduce the raw log to the refined, replayable script

    Args:
        raw_log: Complete recorded action log
        keep_list: Causally necessary actions from backward tracing
        config: Thresholds (defaults to the environment configuration)

    Returns:
        Refined script: one action per target, input values filtered, in
        chronological order
    """
    config = config or get_config()

    # (timestamp, target) identifies an action, not just its target
    keep_keys = {action.key() for action in keep_list}
    survivors = [
        action for action in raw_log
        if action.key() in keep_keys and action.carries_valid_value()
    ]

    unique_targets: Dict[str, RecordedAction] = {}
    for action in survivors:
        existing = unique_targets.get(action.target)
        if existing is not None and action.timestamp <= existing.timestamp:
            continue

        if action.kind == ActionKind.INPUT:
            action = action.model_copy(
                update={"value": filter_text(action.value, action.target, config)}
            )
        unique_targets[action.target] = action

    refined = [
        action for action in unique_targets.values()
        if action.kind == ActionKind.TOGGLE or action.value.strip()
    ]

    return sorted(refined, key=lambda action: action.timestamp)
