"""
Text Quality Filter

Removes meaningless character sequences from free-text inputs while preserving
real content, then applies field-specific cleanup (name extraction, email
extraction, spelling/grammar repair).
"""

from typing import List, Optional

from protege.config import ProtegeConfig, get_config
from protege.text_quality.corrections import fix_grammar
from protege.text_quality.field_types import FieldType, classify_field, extract_email_only, extract_name_only
from protege.text_quality.segment_rules import Segment, SegmentVerdict, classify_segment


def split_segments(text: str) -> List[str]:
    return text.split()


def resolve_context(segments: List[str], config: Optional[ProtegeConfig] = None) -> List[str]:
    """
    Keep meaningful segments and the ambiguous ones their context supports

    Neighbours are judged on the original segment list, not on the filtered one.

    Args:
        segments: Whitespace-separated segments in input order
        config: Thresholds (defaults to the environment configuration)

    Returns:
        Surviving segments in original order
    """
    config = config or get_config()
    verdicts = [classify_segment(segment, config) for segment in segments]

    kept = []
    for i, segment in enumerate(segments):
        verdict = verdicts[i]

        if verdict == SegmentVerdict.GIBBERISH:
            continue

        if verdict == SegmentVerdict.MEANINGFUL:
            kept.append(segment)
            continue

        # Ambiguous: sandwiched between meaningful words
        prev_meaningful = i > 0 and verdicts[i - 1] == SegmentVerdict.MEANINGFUL
        next_meaningful = i < len(segments) - 1 and verdicts[i + 1] == SegmentVerdict.MEANINGFUL
        if prev_meaningful and next_meaningful:
            kept.append(segment)
            continue

        # Medium-length words with enough vowels are likely real
        parsed = Segment.from_raw(segment)
        if (config.context_min_length <= len(parsed.cleaned) <= config.context_max_length
                and parsed.vowel_count >= config.context_min_vowels):
            kept.append(segment)

    return kept


def filter_text(raw: str, field_hint: Optional[str] = None, config: Optional[ProtegeConfig] = None) -> str:
    """
    Clean a free-text value for the given field

    Args:
        raw: Value as typed by the user
        field_hint: Target identifier used to pick field-specific cleanup
        config: Thresholds (defaults to the environment configuration)

    Returns:
        Cleaned value, possibly empty when nothing meaningful was typed

    Examples:
        >>> filter_text("Hey jkhqwz Sarah please", "prospectName")
        'Sarah'
    """
    config = config or get_config()

    cleaned = " ".join(resolve_context(split_segments(raw), config))

    field_type = classify_field(field_hint)
    if field_type == FieldType.NAME:
        return extract_name_only(cleaned)
    if field_type == FieldType.EMAIL:
        return extract_email_only(cleaned)

    # Message fields, general fields and unhinted text get grammar repair
    return fix_grammar(cleaned)
