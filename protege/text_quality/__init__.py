"""
Text quality filtering for free-text inputs recorded in teach mode
"""

from .segment_rules import SegmentVerdict, classify_segment, matching_rule
from .field_types import FieldType, classify_field
from .corrections import correct_spelling, fix_grammar
from .text_filter import filter_text

__all__ = [
    'SegmentVerdict',
    'classify_segment',
    'matching_rule',
    'FieldType',
    'classify_field',
    'correct_spelling',
    'fix_grammar',
    'filter_text',
]
