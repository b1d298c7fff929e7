"""
Field semantics

Maps a target identifier (form field name) to the kind of content it holds and
provides the extraction used for name and email fields.
"""

import re
from enum import Enum
from typing import List, Optional, Tuple

from protege.text_quality.segment_rules import CAPITALIZED_WORD, strip_punctuation


class FieldType(str, Enum):
    """Content category of a form field"""
    NAME = "name"
    EMAIL = "email"
    MESSAGE = "message"
    GENERAL = "general"


# Checked in order, first keyword found in the lowercased target wins
FIELD_TYPE_KEYWORDS: List[Tuple[FieldType, Tuple[str, ...]]] = [
    (FieldType.NAME, ("name", "recipient", "prospect")),
    (FieldType.EMAIL, ("email", "mail")),
    (FieldType.MESSAGE, ("message", "summary", "description", "text", "content", "note")),
]

GREETING_PREFIX = re.compile(r'^(hey|hi|hello|dear|to)\s+', re.IGNORECASE)
EMAIL_ADDRESS = re.compile(r'[\w.-]+@[\w.-]+\.\w+')


def classify_field(target: Optional[str]) -> FieldType:
    """
    Decide what kind of content a field holds from its identifier

    Args:
        target: Field identifier (e.g., 'prospectName', 'email', 'customMessage')

    Returns:
        FieldType, GENERAL when nothing matches or no target is given

    Examples:
        >>> classify_field("prospectName")
        <FieldType.NAME: 'name'>
        >>> classify_field("findingsSummary")
        <FieldType.MESSAGE: 'message'>
    """
    if not target:
        return FieldType.GENERAL

    lowered = target.lower()
    for field_type, keywords in FIELD_TYPE_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return field_type

    return FieldType.GENERAL


def extract_name_only(text: str) -> str:
    """
    Keep only proper-noun tokens, dropping a leading greeting

    Args:
        text: Filtered text (e.g., "Hey Sarah please")

    Returns:
        Space-joined names as written (e.g., "Sarah")
    """
    without_greeting = GREETING_PREFIX.sub('', text, count=1)

    names = []
    for word in without_greeting.split():
        cleaned = strip_punctuation(word)
        if CAPITALIZED_WORD.match(cleaned):
            names.append(word)

    return " ".join(names)


def extract_email_only(text: str) -> str:
    """First email address in text, or the text unchanged when there is none"""
    match = EMAIL_ADDRESS.search(text)
    return match.group(0) if match else text
