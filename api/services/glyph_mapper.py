def map_to_legacy(text, table):
    """
    Replace Unicode substrings with legacy glyphs, longest match first

    Characters with no table entry (Latin text, digits, punctuation, unmapped
    Malayalam) are copied through unchanged.

    Args:
        text (str): Reordered Unicode text
        table (FontTable): Substitution table of the target font

    Returns:
        str: Legacy encoded text
    """
    result = []
    i = 0

    while i < len(text):
        found = False
        for length in range(min(table.max_key_length, len(text) - i), 0, -1):
            glyphs = table.lookup(text[i:i + length])
            if glyphs is not None:
                result.append(glyphs)
                i += length
                found = True
                break

        if not found:
            result.append(text[i])
            i += 1

    return ''.join(result)
