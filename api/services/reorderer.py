"""
Visual reordering of pre-base vowel signs.

Unicode stores the e, ee and ai signs after the consonant cluster they modify;
the legacy fonts expect them before the cluster. A cluster is a run of
(consonant, virama) pairs closed by a bare consonant.
"""

VIRAMA = '\u0D4D'
RA_SUBJOIN = '\u0D4D\u0D30'

PRE_BASE_VOWEL_SIGNS = frozenset({
    '\u0D46',  # e
    '\u0D47',  # ee
    '\u0D48',  # ai
})


def _tokenize(text, reorder_ra_subjoin):
    """Split text into code points, keeping virama + Ra together when it moves"""
    if not reorder_ra_subjoin:
        return list(text)

    tokens = []
    i = 0
    while i < len(text):
        if text.startswith(RA_SUBJOIN, i):
            tokens.append(RA_SUBJOIN)
            i += len(RA_SUBJOIN)
        else:
            tokens.append(text[i])
            i += 1
    return tokens


def _is_pre_base(token):
    return token in PRE_BASE_VOWEL_SIGNS or token == RA_SUBJOIN


def cluster_start(tokens, end):
    """
    Find where the consonant cluster ending at tokens[end] begins

    Steps back over each (consonant, virama) pair while the position behind
    the cursor holds a virama.

    Args:
        tokens (list): Already emitted tokens
        end (int): Index of the cluster's final consonant

    Returns:
        int: Index of the cluster's first consonant, never below 0
    """
    start = end
    while start > 0 and tokens[start - 1] == VIRAMA:
        start -= 2
    return max(start, 0)


def reorder(text, reorder_ra_subjoin=True):
    """
    Move pre-base vowel signs in front of the cluster they follow

    Args:
        text (str): Normalized Unicode text
        reorder_ra_subjoin (bool): Also move the virama + Ra conjunct

    Returns:
        str: Text in visual order
    """
    output = []
    for token in _tokenize(text, reorder_ra_subjoin):
        if _is_pre_base(token) and output:
            output.insert(cluster_start(output, len(output) - 1), token)
        else:
            output.append(token)
    return ''.join(output)
