"""Soft break insertion for long unbroken cell text."""

ZERO_WIDTH_SPACE = "\u200b"
DEFAULT_INTERVAL = 20


def insert_soft_breaks(text: str, interval: int = DEFAULT_INTERVAL) -> str:
    """Insert a zero-width space before every `interval`-th character.

    Positions are counted on the input's own characters, so the function
    must only ever see raw text; running it twice adds a second set of
    markers.

    Args:
        text: Raw cell text
        interval: Break spacing in characters

    Returns:
        Text with invisible break opportunities; unchanged if shorter
        than the interval.
    """
    if not text or len(text) < interval:
        return text

    parts = []
    for i, char in enumerate(text):
        if i > 0 and i % interval == 0:
            parts.append(ZERO_WIDTH_SPACE)
        parts.append(char)
    return "".join(parts)


def strip_soft_breaks(text: str) -> str:
    return text.replace(ZERO_WIDTH_SPACE, "")
