"""
Action Normalizer

Converts raw UI events captured in teach mode ({"type", "target", "value", "timestamp"}
dicts) into validated RecordedAction objects.
"""

from typing import List, Dict, Any, Optional
from pydantic import ValidationError

from protege.recording.schemas import ActionKind, RecordedAction


class ActionNormalizer:
    """
    Transforms raw UI events into RecordedAction format

    Conversions:
    - "type" (UI naming) or "kind" → ActionKind
    - Numeric timestamps → integer capture order
    - Events that cannot be represented are skipped, never raised
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize normalizer

        Args:
            verbose: Print progress and warnings
        """
        self.verbose = verbose

    def normalize(self, raw_events: List[Dict[str, Any]]) -> List[RecordedAction]:
        """
        Convert raw events to RecordedAction list

        Args:
            raw_events: Event dicts emitted by the UI while teaching

        Returns:
            List of RecordedAction objects in the original order
        """
        if not raw_events:
            return []

        self._log(f"[Normalizer] Normalizing {len(raw_events)} raw events...")

        normalized = []
        for index, event in enumerate(raw_events):
            action = self._normalize_event(index, event)
            if action:
                normalized.append(action)

        skipped = len(raw_events) - len(normalized)
        if skipped:
            self._log(f"[Normalizer] Skipped {skipped} malformed events")
        self._log(f"[Normalizer] Produced {len(normalized)} recorded actions")

        return normalized

    def _normalize_event(self, index: int, event: Any) -> Optional[RecordedAction]:
        """
        Convert a single event dict

        Args:
            index: Position of the event in the raw stream (for warnings)
            event: Raw event

        Returns:
            RecordedAction or None if the event is malformed
        """
        if not isinstance(event, dict):
            self._log(f"[Normalizer] Warning: Event {index} is not a mapping, skipping")
            return None

        raw_kind = event.get("kind", event.get("type"))
        kind = self._resolve_kind(raw_kind)
        if kind is None:
            self._log(f"[Normalizer] Warning: Unknown action type in event {index}: {raw_kind}")
            return None

        target = event.get("target")
        if not isinstance(target, str) or not target:
            self._log(f"[Normalizer] Warning: Event {index} has no target, skipping")
            return None

        timestamp = event.get("timestamp")
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            self._log(f"[Normalizer] Warning: Event {index} has no numeric timestamp, skipping")
            return None

        try:
            return RecordedAction(
                kind=kind,
                target=target,
                value=event.get("value"),
                timestamp=int(timestamp)
            )
        except ValidationError as e:
            self._log(f"[Normalizer] Warning: Could not normalize event {index}: {e.errors()[0]['msg']}")
            return None

    def _resolve_kind(self, raw_kind: Any) -> Optional[ActionKind]:
        """Map UI action type names to ActionKind"""
        if isinstance(raw_kind, ActionKind):
            return raw_kind
        if not isinstance(raw_kind, str):
            return None

        try:
            return ActionKind(raw_kind.strip().lower())
        except ValueError:
            return None

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message)
