"""Text normalization for fuzzy search."""

import re
import unicodedata

# Pre-compiled regex pattern for performance
_DISALLOWED_RE = re.compile(r"[^a-z0-9 ]")


def normalize(text: str) -> str:
    """Normalize text for accent- and case-insensitive comparison.

    Algorithm:
    1. Convert to lowercase
    2. Decompose characters (Unicode NFD)
    3. Strip diacritics (combining characters)
    4. Drop everything except a-z, 0-9 and the space character

    Spaces are kept exactly as they are, so the output is stable under a
    second pass. Code points that do not decompose are left to step 4.

    Args:
        text: Input text to normalize.

    Returns:
        Normalized text, possibly empty.

    Examples:
        >>> normalize("Eletricísta")
        'eletricista'
        >>> normalize("Técnico de Ar-Condicionado")
        'tecnico de arcondicionado'
        >>> normalize("Serviço 24h!")
        'servico 24h'
    """
    if not text:
        return ""

    result = unicodedata.normalize("NFD", text.lower())
    result = "".join(c for c in result if not unicodedata.combining(c))

    return _DISALLOWED_RE.sub("", result)
