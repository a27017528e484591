"""Content moderation for submitted ideas.

A small blocklist matched after normalizing case, common character
substitutions (leetspeak) and spacing, so "Sh1t" and "f u c k" are caught
as well as the plain words.
"""

BLOCKED_WORDS = (
    "shit",
    "piss",
    "fuck",
    "cunt",
    "cocksucker",
    "motherfucker",
    "tits",
    "f*ck",
    "f**k",
    "sh*t",
    "n1gger",
    "n1gga",
    "f4g",
    "f4gg0t",
)

_SUBSTITUTIONS = str.maketrans(
    {
        "0": "o",
        "1": "i",
        "3": "e",
        "4": "a",
        "5": "s",
        "7": "t",
        "@": "a",
        "$": "s",
        "!": "i",
        "+": "t",
        " ": None,
    }
)


def normalize_text(text: str) -> str:
    """Lowercase, undo character substitutions and drop spaces."""
    return text.lower().translate(_SUBSTITUTIONS)


_NORMALIZED_BLOCKED_WORDS = frozenset(normalize_text(word) for word in BLOCKED_WORDS)


def contains_profanity(text: str) -> bool:
    """Check text against the blocklist.

    Args:
        text: Text to check

    Returns:
        True if any blocked word appears in the normalized text
    """
    normalized = normalize_text(text)
    return any(word in normalized for word in _NORMALIZED_BLOCKED_WORDS)
