"""Spacing around punctuation marks."""

import re

_AROUND_MARK_RE = re.compile(r"[\t\n\f\r ]*([.,!?:;])[\t\n\f\r ]*")
_MARK_BEFORE_WORD_RE = re.compile(r"([.,!?:;])([a-zA-Z0-9-])")


def format_punctuation(text: str) -> str:
    """Attach punctuation to the preceding word and space it from the next one."""
    text = _AROUND_MARK_RE.sub(r"\1", text)
    text = _MARK_BEFORE_WORD_RE.sub(r"\1 \2", text)
    return " ".join(text.split())