"""
Spelling and grammar repair

Fixed-rule correction layer applied to message-like fields:
- Table-driven misspelling substitutions
- Collapsing of stretched letters ("heyyy" → "hey", "sooooo" → "soo")
- Dangling phrase completion, greeting commas and terminal punctuation
"""

import re
from typing import Dict, List, Tuple


# Misspelling → correction, applied case-insensitively anywhere in the text
SPELLING_CORRECTIONS: Dict[str, str] = {
    "organizzation": "organization",
    "organizzzation": "organization",
    "occassion": "occasion",
    "accomodate": "accommodate",
    "recieve": "receive",
    "beleive": "believe",
    "seperate": "separate",
    "definately": "definitely",
    "goverment": "government",
    "enviroment": "environment",
    "tommorrow": "tomorrow",
    "untill": "until",
    "successfull": "successful",
    "carefull": "careful",
    "beautifull": "beautiful",
    "helpfull": "helpful",
    "gratefull": "grateful",
    "thier": "their",
    "freind": "friend",
    "wierd": "weird",
    "occured": "occurred",
    "begining": "beginning",
    "comming": "coming",
    "happend": "happened",
    "writting": "writing",
    "reccomend": "recommend",
    "neccessary": "necessary",
    "embarass": "embarrass",
    "harrass": "harass",
    "arguement": "argument",
    "judgement": "judgment",
    "acknowledgement": "acknowledgment",
    "publically": "publicly",
    "basicly": "basically",
    "finaly": "finally",
    "realy": "really",
    "usualy": "usually",
}

# Letter pairs that legitimately appear doubled in English words
LEGITIMATE_DOUBLES = frozenset({
    "ee", "oo", "ll", "ss", "tt", "ff", "pp", "mm", "nn", "rr", "cc", "dd"
})

# Phrase a message commonly trails off with → words that complete it
DANGLING_COMPLETIONS: Dict[str, str] = {
    "join our": "organization",
}

_CORRECTION_PATTERNS: List[Tuple[re.Pattern, str]] = [
    (re.compile(re.escape(misspelling), re.IGNORECASE), correction)
    for misspelling, correction in SPELLING_CORRECTIONS.items()
]

_DANGLING_PATTERNS: List[Tuple[re.Pattern, str]] = [
    (re.compile(r'\b' + re.escape(phrase) + r'\.?$', re.IGNORECASE), f"{phrase} {completion}.")
    for phrase, completion in DANGLING_COMPLETIONS.items()
]

REPEATED_CHARACTER = re.compile(r'(.)\1{2,}')
GREETING_WITHOUT_COMMA = re.compile(r'^((?i:hey|hi|hello|dear))\s+([A-Z][a-z]+)\s+(?!,)')
TERMINAL_PUNCTUATION = ('.', '!', '?')


def collapse_repeated_letters(text: str) -> str:
    """
    Shorten runs of 3+ identical characters

    A run becomes a double when that double is legitimate, otherwise a single
    character.
    """
    def _collapse(match: re.Match) -> str:
        char = match.group(1)
        double = char + char
        if double.lower() in LEGITIMATE_DOUBLES:
            return double
        return char

    return REPEATED_CHARACTER.sub(_collapse, text)


def correct_spelling(text: str) -> str:
    """
    Apply the correction table, then collapse stretched letters

    Args:
        text: Text to correct

    Returns:
        Corrected text (misspellings not in the table are left untouched)
    """
    corrected = text
    for pattern, correction in _CORRECTION_PATTERNS:
        corrected = pattern.sub(correction, corrected)

    return collapse_repeated_letters(corrected)


def complete_dangling_phrase(text: str) -> str:
    for pattern, completed in _DANGLING_PATTERNS:
        match = pattern.search(text)
        if match:
            return text[:match.start()] + completed
    return text


def fix_grammar(text: str) -> str:
    """
    Repair spelling and basic grammar of a free-text message

    Args:
        text: Filtered message text

    Returns:
        Corrected text ending with terminal punctuation; blank text is returned as-is
    """
    if not text or not text.strip():
        return text

    fixed = correct_spelling(text)
    fixed = complete_dangling_phrase(fixed)

    # "Hey Sarah please" → "Hey Sarah, please"
    fixed = GREETING_WITHOUT_COMMA.sub(r'\1 \2, ', fixed, count=1)

    if not fixed.strip().endswith(TERMINAL_PUNCTUATION):
        fixed = fixed.strip() + '.'

    return re.sub(r'\s+', ' ', fixed).strip()
