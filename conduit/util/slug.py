"""Slug generation for articles.

A slug is the title transliterated to ASCII, lower-cased, stripped of
punctuation and hyphen-joined, followed by a random base-36 suffix
drawn from 36**6 possibilities. Uniqueness is probabilistic: two
articles with the same title collide with probability ~1 / 2.18e9.
"""

import re
import secrets
import string
import unicodedata

SUFFIX_LENGTH = 6
SUFFIX_SPACE = 36**SUFFIX_LENGTH
# Keeps base + "-" + suffix well inside the 255-character slug column
MAX_BASE_LENGTH = 200
_BASE36_ALPHABET = string.digits + string.ascii_lowercase


def to_base36(number: int, width: int = SUFFIX_LENGTH) -> str:
    """Render a non-negative integer in lowercase base 36, zero-padded."""
    if number < 0:
        raise ValueError("number must be non-negative")
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_ALPHABET[remainder])
    return "".join(reversed(digits)).rjust(width, "0")


def transliterate(title: str) -> str:
    """Turn a title into hyphen-joined lowercase ASCII words.

    "A New Day!" -> "a-new-day", "Crème brûlée" -> "creme-brulee"
    """
    ascii_title = (
        unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
    )
    words = re.findall(r"[a-z0-9]+", ascii_title.lower())
    return "-".join(words)


def random_suffix() -> str:
    """Draw a random 6-character base-36 suffix."""
    return to_base36(secrets.randbelow(SUFFIX_SPACE))


def slugify(title: str) -> str:
    """Derive a URL-safe slug from an article title.

    Titles without any transliterable characters get the bare suffix.
    Long titles are cut to MAX_BASE_LENGTH characters before the suffix.
    """
    base = transliterate(title)[:MAX_BASE_LENGTH].rstrip("-")
    suffix = random_suffix()
    return f"{base}-{suffix}" if base else suffix
