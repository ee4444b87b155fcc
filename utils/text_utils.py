MALAYALAM_BLOCK_START = '\u0D00'
MALAYALAM_BLOCK_END = '\u0D7F'


def is_malayalam_char(char):
    """Check whether a single character falls in the Malayalam Unicode block"""
    return MALAYALAM_BLOCK_START <= char <= MALAYALAM_BLOCK_END


def count_malayalam_chars(text):
    """
    Count the code points of text that belong to the Malayalam block

    Args:
        text (str): Text to inspect

    Returns:
        int: Number of Malayalam code points
    """
    return sum(1 for c in text if is_malayalam_char(c))


def is_blank(text):
    """True for None, empty or whitespace-only text"""
    return not text or not text.strip()
