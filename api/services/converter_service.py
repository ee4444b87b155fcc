"""
Unicode Malayalam to legacy font conversion.

Every conversion runs normalize -> reorder -> map_to_legacy against the table
of the requested encoding.
"""

import logging

from api.services.font_tables import FONT_A, FONT_B, get_font_table
from api.services.glyph_mapper import map_to_legacy
from api.services.normalizer import normalize
from api.services.reorderer import reorder
from config import Config
from utils.text_utils import count_malayalam_chars, is_blank

logger = logging.getLogger(__name__)

# 8-bit code page the legacy fonts were drawn over
LEGACY_CODEPAGE = 'cp1252'


def convert(text, encoding, reorder_ra_subjoin=None):
    """
    Convert Unicode Malayalam to a legacy font encoding

    Args:
        text (str): Unicode text
        encoding (str): Target encoding name or alias
        reorder_ra_subjoin (bool): Move virama + Ra before its cluster;
            None uses Config.REORDER_RA_SUBJOIN

    Returns:
        str: Legacy encoded text, empty for blank input

    Raises:
        UnknownEncodingError: if the encoding is not supported
    """
    table = get_font_table(encoding)
    if is_blank(text):
        return ""

    if reorder_ra_subjoin is None:
        reorder_ra_subjoin = Config.REORDER_RA_SUBJOIN

    processed = normalize(text)
    processed = reorder(processed, reorder_ra_subjoin=reorder_ra_subjoin)
    output = map_to_legacy(processed, table)

    logger.debug(f"Converted {len(text)} code points to {table.name} ({len(output)} characters)")
    return output


def convert_to_font_a(text):
    """Convert to the ML series (ML-TTKarthika) layout"""
    return convert(text, FONT_A)


def convert_to_font_b(text):
    """Convert to the FML series (FML-Revathi) layout"""
    return convert(text, FONT_B)


def stats(text, encoding, reorder_ra_subjoin=None):
    """
    Run a conversion and report sizes for diagnostics

    Args:
        text (str): Unicode text
        encoding (str): Target encoding name or alias

    Returns:
        dict: input_length, output_length, output_text and
            malayalam_char_count of the input
    """
    text = text or ""
    output = convert(text, encoding, reorder_ra_subjoin=reorder_ra_subjoin)
    return {
        'input_length': len(text),
        'output_length': len(output),
        'output_text': output,
        'malayalam_char_count': count_malayalam_chars(text),
    }


def encode_legacy(text, encoding, reorder_ra_subjoin=None):
    """
    Convert and encode to the legacy code page

    Code points the code page cannot hold (unmapped Malayalam, other scripts)
    are written as '?'.

    Returns:
        bytes: Legacy 8-bit text
    """
    return convert(text, encoding, reorder_ra_subjoin=reorder_ra_subjoin).encode(LEGACY_CODEPAGE, errors='replace')


def describe_encodings():
    """List the supported encodings with their table details"""
    encodings = []
    for encoding in (FONT_A, FONT_B):
        table = get_font_table(encoding)
        encodings.append({
            'id': encoding,
            'name': table.name,
            'entries': len(table),
            'max_key_length': table.max_key_length,
        })
    return encodings
