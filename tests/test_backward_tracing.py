"""
Tests for backward tracing
"""

from protege.recording.schemas import ActionKind, RecordedAction, TerminalState
from protege.refinement.goal_deduction import deduce_goal
from protege.refinement.backward_tracing import trace_backward


def toggle(target, value, timestamp):
    return RecordedAction(kind=ActionKind.TOGGLE, target=target, value=value, timestamp=timestamp)


def type_into(target, value, timestamp):
    return RecordedAction(kind=ActionKind.INPUT, target=target, value=value, timestamp=timestamp)


def test_keeps_one_action_per_goal_target():
    log = [
        toggle("task-1", True, 1),
        type_into("email", "asdkjqwxmz", 2),
        type_into("email", "user@example.com", 3),
    ]

    keep_list = trace_backward(log, deduce_goal(log))

    assert keep_list == [log[0], log[2]]


def test_equal_filtered_values_latest_timestamp_wins():
    """Two inputs that filter to the same value: the later one is kept"""
    log = [
        type_into("customMessage", "hello world", 1),
        type_into("customMessage", "hello   world.", 2),
    ]
    goal = deduce_goal(log)

    assert goal.field_values == {"customMessage": "hello world."}
    assert trace_backward(log, goal) == [log[1]]


def test_greatest_timestamp_wins_regardless_of_log_order():
    log = [
        type_into("customMessage", "hello world.", 4),
        type_into("customMessage", "hello world", 3),
    ]

    assert trace_backward(log, deduce_goal(log)) == [log[0]]


def test_toggle_must_complete_the_task():
    log = [
        toggle("task-1", True, 1),
        toggle("task-1", False, 2),
        toggle("task-1", True, 3),
    ]

    assert trace_backward(log, deduce_goal(log)) == [log[2]]


def test_inconsistent_input_is_not_kept():
    log = [type_into("email", "user@example.com", 1)]
    goal = TerminalState(field_values={"email": "other@example.com"})

    assert trace_backward(log, goal) == []


def test_targets_outside_goal_are_ignored():
    log = [
        toggle("task-1", True, 1),
        toggle("darkMode", True, 2),
        type_into("reportId", "qwrtzp", 3),
    ]

    assert trace_backward(log, deduce_goal(log)) == [log[0]]


def test_keep_list_is_chronological():
    log = [
        toggle("task-2", True, 5),
        type_into("email", "user@example.com", 2),
    ]

    keep_list = trace_backward(log, deduce_goal(log))

    assert [action.timestamp for action in keep_list] == [2, 5]
