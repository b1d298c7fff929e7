"""
Tests for the segment classification rule tables
"""

from protege.config import ProtegeConfig
from protege.text_quality.segment_rules import (
    SegmentVerdict,
    Segment,
    classify_segment,
    matching_rule,
)


def test_no_vowels_rule():
    """Long segments without vowels are gibberish"""
    assert classify_segment("bcdfghjklm") == SegmentVerdict.GIBBERISH
    assert matching_rule("bcdfghjklm") == "no_vowels"


def test_repeated_character_rule():
    """Keyboard mashing (4+ identical characters) is gibberish"""
    assert matching_rule("heyyyyy") == "repeated_character"
    assert matching_rule("zzzz") == "repeated_character"
    # Three in a row is still a word
    assert classify_segment("sooo") == SegmentVerdict.MEANINGFUL


def test_consonant_cluster_rule():
    """Five or more consonants in a row are gibberish"""
    assert matching_rule("asdkjqwxmz") == "consonant_cluster"
    assert matching_rule("jkhqwz") == "consonant_cluster"


def test_long_low_vowel_ratio_rule():
    """Long strings with almost no vowels are gibberish"""
    segment = "bcd-fgh-jkl-mnp-a"
    assert Segment.from_raw(segment).vowel_ratio < 0.15
    assert matching_rule(segment) == "long_low_vowel_ratio"


def test_meaningful_rules():
    """Each meaningful rule recognises its own shape"""
    assert matching_rule("Sarah") == "proper_noun"
    assert matching_rule("Sarah,") == "proper_noun"
    assert matching_rule("please") == "lowercase_word"
    assert matching_rule("2024") == "number"
    assert matching_rule("O'Neil") == "contraction"

    for segment in ["Sarah", "please", "2024", "O'Neil", "don't"]:
        assert classify_segment(segment) == SegmentVerdict.MEANINGFUL


def test_ambiguous_segments():
    """Segments no rule claims are ambiguous"""
    # Too short
    assert classify_segment("x") == SegmentVerdict.AMBIGUOUS
    assert classify_segment("a.") == SegmentVerdict.AMBIGUOUS
    # Lowercase but no vowels
    assert classify_segment("xq") == SegmentVerdict.AMBIGUOUS
    # Uppercase words are not lowercase words
    assert classify_segment("HELLO") == SegmentVerdict.AMBIGUOUS
    assert matching_rule("HELLO") is None


def test_gibberish_checked_before_meaningful():
    """A capitalized consonant cluster is still gibberish"""
    assert classify_segment("Bcdfgh") == SegmentVerdict.GIBBERISH


def test_thresholds_come_from_config():
    """Raising the consonant run threshold changes the verdict"""
    relaxed = ProtegeConfig(consonant_run_length=7)

    assert classify_segment("jkhqwz") == SegmentVerdict.GIBBERISH
    assert classify_segment("jkhqwz", relaxed) == SegmentVerdict.AMBIGUOUS
