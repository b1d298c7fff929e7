"""
Task Describer

Builds human-readable descriptions of a refined script for the "save this task?"
suggestion and the run-task confirmation.
"""

from typing import List, Sequence

from protege.recording.schemas import ActionKind, RecordedAction


COMPLETE_TASK = "complete a task"
FILL_FIELD = "fill a form field"


def describe_task(actions: Sequence[RecordedAction]) -> str:
    """
    One-line summary of what a script does

    Args:
        actions: Refined script

    Returns:
        Unique action categories joined with "and" (e.g., "complete a task and
        fill a form field")
    """
    if not actions:
        return "No actions recorded"

    categories: List[str] = []
    for action in actions:
        if action.kind == ActionKind.TOGGLE and action.value is True:
            category = COMPLETE_TASK
        elif action.kind == ActionKind.INPUT and isinstance(action.value, str):
            category = FILL_FIELD
        else:
            continue

        if category not in categories:
            categories.append(category)

    if not categories:
        return "Perform actions"

    return " and ".join(categories)


def summarize_actions(actions: Sequence[RecordedAction]) -> str:
    """
    Build numbered, human-readable listing of a script

    Args:
        actions: Actions to summarize

    Returns:
        Formatted action summary, one line per action
    """
    summary_lines = []

    for i, action in enumerate(actions, 1):
        if action.kind == ActionKind.TOGGLE:
            state = "done" if action.value is True else "not done"
            summary_lines.append(f"{i}. Mark '{action.target}' as {state}")

        elif action.kind == ActionKind.INPUT:
            text = action.value if isinstance(action.value, str) else ""
            # Truncate long text
            display_text = text if len(text) < 50 else text[:47] + "..."
            summary_lines.append(f"{i}. Fill '{action.target}': {display_text}")

        else:
            summary_lines.append(f"{i}. Click '{action.target}'")

    return "\n".join(summary_lines)
