"""
Canonicalization of Unicode Malayalam before legacy font conversion.

The rules are literal substring replacements applied in a fixed order; later
rules rely on the canonical forms produced by earlier ones. Passes repeat
until nothing changes, so normalized text is left alone by another pass.
Code points are spelled as escapes because several rules map between
sequences that render identically.
"""

# Must run before the chillu rules turn n, virama, ZWJ into chillu n
NASAL_RULES = [
    ('\u0D28\u0D4D\u200D\u0D2A', '\u0D2E\u0D4D\u0D2A'),  # n, virama, ZWJ + pa -> mpa
]

# Chandrakkala + ZWJ sequences -> atomic chillu letters
CHILLU_RULES = [
    ('\u0D31\u0D4D\u200D', '\u0D7C'),  # rra -> chillu rr
    ('\u0D23\u0D4D\u200D', '\u0D7A'),  # nna -> chillu nn
    ('\u0D28\u0D4D\u200D', '\u0D7B'),  # na -> chillu n
    ('\u0D30\u0D4D\u200D', '\u0D7C'),  # ra -> chillu rr
    ('\u0D32\u0D4D\u200D', '\u0D7D'),  # la -> chillu l
    ('\u0D33\u0D4D\u200D', '\u0D7E'),  # lla -> chillu ll
    ('\u0D15\u0D4D\u200D', '\u0D7F'),  # ka -> chillu k
]

# Orthographic corrections; chillu n here includes the ZWJ spelling
CORRECTION_RULES = [
    ('\u0D7B\u0D31', '\u0D28\u0D4D\u0D31'),  # chillu n + rra -> nta
    ('\u0D31\u0D31', '\u0D31\u0D4D\u0D31'),  # rra rra -> tta
]

# Two-part vowel signs typed as separate code points -> precomposed sign
VOWEL_SIGN_RULES = [
    ('\u0D46\u0D46', '\u0D48'),  # e + e -> ai
    ('\u0D46\u0D3E', '\u0D4A'),  # e + aa -> o
    ('\u0D3E\u0D46', '\u0D4A'),  # aa + e -> o
    ('\u0D47\u0D3E', '\u0D4B'),  # ee + aa -> oo
    ('\u0D3E\u0D47', '\u0D4B'),  # aa + ee -> oo
    ('\u0D46\u0D57', '\u0D4C'),  # e + au length mark -> au
    ('\u0D57\u0D46', '\u0D4C'),  # au length mark + e -> au
]

# Independent vowel followed by a sign -> single vowel letter
VOWEL_RULES = [
    ('\u0D0E\u0D46', '\u0D10'),  # E + e sign -> AI
    ('\u0D07\u0D57', '\u0D08'),  # I + au length mark -> II
    ('\u0D09\u0D57', '\u0D0A'),  # U + au length mark -> UU
    ('\u0D12\u0D57', '\u0D14'),  # O + au length mark -> AU
]

# The legacy fonts draw these as two glyphs on either side of the consonant
SPLIT_VOWEL_RULES = [
    ('\u0D4A', '\u0D46\u0D3E'),  # o -> e + aa
    ('\u0D4B', '\u0D47\u0D3E'),  # oo -> ee + aa
    ('\u0D4C', '\u0D46\u0D57'),  # au -> e + au length mark
]

NORMALIZATION_RULES = (
    NASAL_RULES
    + CHILLU_RULES
    + CORRECTION_RULES
    + VOWEL_SIGN_RULES
    + VOWEL_RULES
    + SPLIT_VOWEL_RULES
)


def apply_rules(text):
    """One pass of every rule in order"""
    for source, target in NORMALIZATION_RULES:
        text = text.replace(source, target)
    return text


def normalize(text):
    """
    Canonicalize Malayalam text for the legacy mapping tables

    Args:
        text (str): Unicode text, any content

    Returns:
        str: Text with NORMALIZATION_RULES applied in order, repeated
            until a pass changes nothing
    """
    while True:
        result = apply_rules(text)
        if result == text:
            return result
        text = result
