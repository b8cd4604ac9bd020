from __future__ import annotations

"""
Identifier Normalizer.

Converts raw path segments (directory and file names) into valid,
human-readable Python identifiers. Separators ('.', '-', '_', space) start a
new PascalCase word, Unicode letters and decimal digits are kept, everything
else is dropped. The transformation is pure and total: punctuation-only or
digit-leading names are rescued with a leading underscore instead of failing.
"""

import keyword
import unicodedata

from assetgen.domain.constants import IDENTIFIER_CATEGORIES, IDENTIFIER_SEPARATORS

# Version of the Unicode character database driving letter/digit classification
UNICODE_VERSION: str = unicodedata.unidata_version

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def normalize_identifier(text: str, strip_extension: bool = False) -> str:
    """
    Convert a path segment into a PascalCase Python identifier.

    Examples:
        normalize_identifier("style.min.css")        -> "StyleMinCss"
        normalize_identifier("style.min.css", True)  -> "StyleMin"
        normalize_identifier("404.png")              -> "_404Png"

    Args:
        text: Raw directory or file name.
        strip_extension: Remove only the last '.'-delimited suffix before
            converting. Inner dots still act as word boundaries.

    Returns:
        str: A non-empty identifier that is valid in Python source.
    """
    if strip_extension:
        text = strip_last_extension(text)

    chars = []
    capitalize_next = True

    for ch in text:
        if ch in IDENTIFIER_SEPARATORS:
            capitalize_next = True
        elif unicodedata.category(ch) in IDENTIFIER_CATEGORIES:
            chars.append(_upper_char(ch) if capitalize_next else ch)
            capitalize_next = False

    return _finalize("".join(chars))


def to_pascal_case(text: str) -> str:
    """Normalize a directory segment; every dot is a word boundary."""
    return normalize_identifier(text, strip_extension=False)


def strip_last_extension(file_name: str) -> str:
    """
    Remove the final '.'-suffix of a file name.

    A leading dot marks a hidden file, not an extension, so '.htaccess'
    is returned unchanged.
    """
    idx = file_name.rfind(".")
    if idx > 0:
        return file_name[:idx]
    return file_name

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _upper_char(ch: str) -> str:
    """Upper-case one character, or keep it when the mapping expands ('ß' -> 'SS')."""
    upper = ch.upper()
    return upper if len(upper) == 1 else ch


def _finalize(name: str) -> str:
    """Apply the underscore fallback and Python identifier rules."""
    # Python compares identifiers in NFKC form; normalize so collision
    # detection sees the same names the interpreter does.
    name = unicodedata.normalize("NFKC", name)
    name = "".join(ch for ch in name if ("_" + ch).isidentifier())

    if not name or name[0].isdecimal() or not name.isidentifier():
        name = "_" + name

    if keyword.iskeyword(name):
        name += "_"

    return name
