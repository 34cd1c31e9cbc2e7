"""Shared text normalization for every matcher."""

import re

_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Lowercase, turn punctuation into spaces, and collapse whitespace.

    Total and idempotent: ``normalize(normalize(s)) == normalize(s)``.
    """
    if not text:
        return ""
    lowered = _NON_WORD_RE.sub(" ", text.lower())
    return _WHITESPACE_RE.sub(" ", lowered).strip()


def words(text: str) -> list[str]:
    """Normalized words of ``text``."""
    normalized = normalize(text)
    return normalized.split(" ") if normalized else []


def bounded(pattern: str) -> str:
    """Wrap a regex so it cannot start or end inside a word or a token like "c++".

    Plain ``\\b`` fails around terms such as "c++" or ".net".
    """
    return rf"(?<![\w+#]){pattern}(?![\w+#])"
