"""Text normalization for accent and punctuation insensitive matching."""

import re
import unicodedata

_STRIP_PATTERN = re.compile(r"[^\w\s]|_")


def normalize_text(text):
    """Lower-case ``text``, drop diacritics and strip punctuation.

    >>> normalize_text("Tiéndà!")
    'tienda'
    """
    if not text:
        return ""

    decomposed = unicodedata.normalize("NFD", text.lower())
    without_marks = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _STRIP_PATTERN.sub("", without_marks)
