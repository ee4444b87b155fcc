"""
Legacy font substitution tables.

Each table lives in font_data/<encoding>.yaml and maps a Unicode substring
(consonant, vowel sign or conjunct) to the glyph sequence of the legacy font.
Tables are loaded once per process and never modified afterwards.
"""

import logging
import os
import threading
from types import MappingProxyType

import yaml
from yaml.constructor import ConstructorError

logger = logging.getLogger(__name__)

FONT_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'font_data')

FONT_A = 'ml'
FONT_B = 'fml'
SUPPORTED_ENCODINGS = (FONT_A, FONT_B)

ENCODING_ALIASES = {
    'ml': FONT_A,
    'font_a': FONT_A,
    'fml': FONT_B,
    'font_b': FONT_B,
}

# Loaded tables, keyed by encoding id
_font_tables = {}
_table_lock = threading.Lock()


class UnknownEncodingError(ValueError):
    """Raised for an encoding name with no substitution table"""


class FontTableError(ValueError):
    """Raised when a table file does not describe a usable table"""


class DuplicateKeyError(ConstructorError):
    """Raised when a table file lists the same key twice"""


class UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that refuses mappings with repeated keys"""

    def construct_mapping(self, node, deep=False):
        seen = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if key in seen:
                raise DuplicateKeyError(
                    'while constructing a mapping', node.start_mark,
                    f'found duplicate key {key!r}', key_node.start_mark
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


class FontTable:
    """Read-only substitution table for one legacy encoding"""

    def __init__(self, name, encoding, entries):
        for key, value in entries.items():
            if not isinstance(key, str) or not key:
                raise FontTableError(f'{name}: table keys must be non-empty strings, got {key!r}')
            if not isinstance(value, str):
                raise FontTableError(f'{name}: value for {key!r} must be a string, got {value!r}')

        self.name = name
        self.encoding = encoding
        self.entries = MappingProxyType(dict(entries))
        self.max_key_length = max((len(key) for key in self.entries), default=1)

    def lookup(self, key):
        """Return the legacy glyphs for an exact key, or None"""
        return self.entries.get(key)

    def __contains__(self, key):
        return key in self.entries

    def __len__(self):
        return len(self.entries)

    def __repr__(self):
        return f'FontTable({self.name!r}, encoding={self.encoding!r}, entries={len(self)})'


def resolve_encoding(name):
    """
    Map an encoding name or alias to its table id

    Args:
        name (str): 'ml', 'fml', 'font_a' or 'font_b', any case

    Returns:
        str: FONT_A or FONT_B

    Raises:
        UnknownEncodingError: if the name is not supported
    """
    if isinstance(name, str):
        encoding = ENCODING_ALIASES.get(name.strip().lower())
        if encoding:
            return encoding
    raise UnknownEncodingError(
        f"Unsupported encoding {name!r}; expected one of {', '.join(sorted(ENCODING_ALIASES))}"
    )


def load_font_table(path):
    """
    Read a substitution table from a YAML file

    Args:
        path (str): Path to the table file

    Returns:
        FontTable: The loaded table

    Raises:
        DuplicateKeyError: if a key appears twice
        FontTableError: if the file is missing its entries
    """
    with open(path, encoding='utf-8') as f:
        data = yaml.load(f, Loader=UniqueKeyLoader)

    if not isinstance(data, dict) or not isinstance(data.get('entries'), dict):
        raise FontTableError(f'{path}: expected a mapping with an "entries" mapping')

    encoding = data.get('encoding') or os.path.splitext(os.path.basename(path))[0]
    table = FontTable(data.get('name', encoding), encoding, data['entries'])
    logger.info(f"Loaded font table {table.name} ({len(table)} entries, max key length {table.max_key_length})")
    return table


def get_font_table(encoding):
    """Thread-safe cached access to the table for an encoding"""
    encoding = resolve_encoding(encoding)
    with _table_lock:
        if encoding not in _font_tables:
            _font_tables[encoding] = load_font_table(os.path.join(FONT_DATA_DIR, f'{encoding}.yaml'))
        return _font_tables[encoding]


def preload_font_tables():
    """Load every supported table up front"""
    return [get_font_table(encoding) for encoding in SUPPORTED_ENCODINGS]
