"""
Segment classification rules

Each whitespace-separated segment of a free-text input is judged by two ordered
rule tables. The first gibberish rule that fires drops the segment; otherwise the
first meaningful rule that fires keeps it. Segments matched by neither table are
ambiguous and left to context resolution.
"""

import re
from dataclasses import dataclass
from enum import Enum
from itertools import groupby
from typing import Callable, List, Optional, Tuple

from protege.config import ProtegeConfig, get_config


VOWELS = frozenset("aeiouAEIOU")
CONSONANTS = frozenset("bcdfghjklmnpqrstvwxyzBCDFGHJKLMNPQRSTVWXYZ")

STRIPPED_PUNCTUATION = re.compile(r"""[.,!?;:'"]""")
CAPITALIZED_WORD = re.compile(r'^[A-Z][a-z]+$')
LOWERCASE_WORD = re.compile(r'^[a-z]+$')
DIGITS_ONLY = re.compile(r'^[0-9]+$')
CONTRACTION = re.compile(r"^[a-z]+['’][a-z]*$", re.IGNORECASE)


class SegmentVerdict(str, Enum):
    """Three-way classification of a text segment"""
    GIBBERISH = "gibberish"
    MEANINGFUL = "meaningful"
    AMBIGUOUS = "ambiguous"


def strip_punctuation(text: str) -> str:
    return STRIPPED_PUNCTUATION.sub('', text)


@dataclass(frozen=True)
class Segment:
    """A raw segment together with its punctuation-stripped form"""
    raw: str
    cleaned: str

    @classmethod
    def from_raw(cls, raw: str) -> 'Segment':
        return cls(raw=raw, cleaned=strip_punctuation(raw))

    @property
    def vowel_count(self) -> int:
        return sum(1 for ch in self.cleaned if ch in VOWELS)

    @property
    def vowel_ratio(self) -> float:
        if not self.cleaned:
            return 0.0
        return self.vowel_count / len(self.cleaned)


@dataclass(frozen=True)
class SegmentRule:
    """Named predicate over a segment"""
    name: str
    check: Callable[[Segment, ProtegeConfig], bool]


def _longest_run(text: str, predicate: Optional[Callable[[str], bool]] = None) -> int:
    """
    Length of the longest run in text

    Without a predicate, counts runs of the same character. With a predicate,
    counts runs of consecutive characters satisfying it.
    """
    longest = 0
    if predicate is None:
        for _, group in groupby(text):
            longest = max(longest, sum(1 for _ in group))
    else:
        for matches, group in groupby(text, key=predicate):
            if matches:
                longest = max(longest, sum(1 for _ in group))
    return longest


# Gibberish rules look at the punctuation-stripped form
GIBBERISH_RULES: List[SegmentRule] = [
    SegmentRule(
        "no_vowels",
        lambda seg, cfg: len(seg.cleaned) > cfg.vowelless_max_length and seg.vowel_count == 0
    ),
    SegmentRule(
        "repeated_character",
        lambda seg, cfg: _longest_run(seg.cleaned) >= cfg.repeat_run_length
    ),
    SegmentRule(
        "consonant_cluster",
        lambda seg, cfg: _longest_run(seg.cleaned, lambda ch: ch in CONSONANTS) >= cfg.consonant_run_length
    ),
    SegmentRule(
        "long_low_vowel_ratio",
        lambda seg, cfg: (
            len(seg.cleaned) > cfg.long_segment_length
            and not CAPITALIZED_WORD.match(seg.cleaned)
            and seg.vowel_ratio < cfg.min_vowel_ratio
        )
    ),
]

MEANINGFUL_RULES: List[SegmentRule] = [
    SegmentRule(
        "proper_noun",
        lambda seg, cfg: bool(CAPITALIZED_WORD.match(seg.cleaned))
    ),
    SegmentRule(
        "lowercase_word",
        lambda seg, cfg: (
            bool(LOWERCASE_WORD.match(seg.cleaned))
            and cfg.min_vowel_ratio <= seg.vowel_ratio <= cfg.max_vowel_ratio
            and len(seg.cleaned) <= cfg.max_word_length
        )
    ),
    SegmentRule(
        "number",
        lambda seg, cfg: bool(DIGITS_ONLY.match(seg.cleaned))
    ),
    # Checked on the raw form, apostrophes are stripped from the cleaned one
    SegmentRule(
        "contraction",
        lambda seg, cfg: bool(CONTRACTION.match(seg.raw))
    ),
]


def _first_match(segment: Segment, rules: List[SegmentRule], config: ProtegeConfig) -> Optional[SegmentRule]:
    for rule in rules:
        if rule.check(segment, config):
            return rule
    return None


def evaluate_segment(raw: str, config: Optional[ProtegeConfig] = None) -> Tuple[SegmentVerdict, Optional[str]]:
    """
    Classify a segment and report which rule decided it

    Args:
        raw: Segment as it appeared in the input (punctuation included)
        config: Thresholds (defaults to the environment configuration)

    Returns:
        Tuple of (verdict, rule_name); rule_name is None for ambiguous segments
    """
    config = config or get_config()
    segment = Segment.from_raw(raw)

    rule = _first_match(segment, GIBBERISH_RULES, config)
    if rule:
        return SegmentVerdict.GIBBERISH, rule.name

    min_length = config.min_meaningful_length
    if len(segment.raw) < min_length or len(segment.cleaned) < min_length:
        return SegmentVerdict.AMBIGUOUS, None

    rule = _first_match(segment, MEANINGFUL_RULES, config)
    if rule:
        return SegmentVerdict.MEANINGFUL, rule.name

    return SegmentVerdict.AMBIGUOUS, None


def classify_segment(raw: str, config: Optional[ProtegeConfig] = None) -> SegmentVerdict:
    return evaluate_segment(raw, config)[0]


def matching_rule(raw: str, config: Optional[ProtegeConfig] = None) -> Optional[str]:
    """Name of the rule that classified the segment, None if ambiguous"""
    return evaluate_segment(raw, config)[1]
