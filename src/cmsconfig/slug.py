"""Derive machine-safe identifiers from human-readable labels."""

import re
import unicodedata

_STRIPPED = re.compile(r"[^\w\s-]")
_SEPARATORS = re.compile(r"[\s_-]+")


def slugify(text: str) -> str:
    """Turn a label into a lowercase, underscore-joined ASCII identifier.

    Accented letters are folded to their base form and punctuation is
    dropped. Runs of whitespace, hyphens or underscores become a single
    underscore, trimmed at either end.

    Examples:
        >>> slugify("Título")
        'titulo'
        >>> slugify("Palavras-chave")
        'palavras_chave'
        >>> slugify("")
        ''
    """
    text = unicodedata.normalize("NFKD", text or "")
    text = text.encode("ascii", "ignore").decode("ascii").lower()
    text = _STRIPPED.sub("", text)
    return _SEPARATORS.sub("_", text).strip("_")
