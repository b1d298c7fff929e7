"""
Tests for the text quality filter
"""

from protege.text_quality.text_filter import filter_text, resolve_context


def test_name_field_keeps_only_proper_nouns():
    """Greeting stripped, gibberish dropped, only the name kept"""
    assert filter_text("Hey jkhqwz Sarah please", "prospectName") == "Sarah"


def test_name_field_keeps_punctuation_as_typed():
    assert filter_text("Dear Sarah, and Tom.", "recipient") == "Sarah, Tom."


def test_message_field_gets_spelling_and_punctuation():
    """Listed misspellings are corrected, unlisted ones remain"""
    result = filter_text("i beleive we shoud finalise the reccomend", "customMessage")

    assert result == "believe we shoud finalise the recommend."
    assert "shoud" in result


def test_email_field_extracts_address():
    assert filter_text("user@example.com", "email") == "user@example.com"
    assert filter_text("mail me at user@example.com", "email") == "user@example.com"


def test_gibberish_filters_to_empty():
    assert filter_text("asdkjqwxmz", "email") == ""
    assert filter_text("qwrtzp", "reportId") == ""
    assert filter_text("", "customMessage") == ""


def test_sandwiched_ambiguous_segment_is_kept():
    assert filter_text("hello xq world", "notes") == "hello xq world."
    assert filter_text("xq world", "notes") == "world."


def test_neighbours_judged_on_original_segments():
    """Removing gibberish does not turn a neighbour into context"""
    assert resolve_context(["hello", "xq", "zzzz", "world"]) == ["hello", "world"]


def test_ambiguous_segment_with_vowels_is_kept():
    assert filter_text("HELLO there") == "HELLO there."


def test_general_field_gets_grammar_repair():
    assert filter_text("active", "status") == "active."
    assert filter_text("please join our") == "please join our organization."


def test_name_field_without_names_is_empty():
    assert filter_text("hey there", "recipient") == ""


def test_stretched_letters_in_messages():
    assert filter_text("sooo good", "note") == "soo good."
