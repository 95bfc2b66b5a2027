"""Case changes driven by "(up)", "(low)" and "(cap)" tags with optional counts."""

import re
import string

_TAG_RE = re.compile(r"\((up|low|cap)(,[\t\n\f\r ]*[0-9]+)?\)")
_ALNUM = frozenset(string.ascii_letters + string.digits)
_MAX_INT64 = 2**63 - 1


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


_TRANSFORMS = {"up": str.upper, "low": str.lower, "cap": _capitalize}


def _count(raw: str | None) -> int:
    if not raw:
        return 1
    value = int(raw[1:].strip())
    return value if value <= _MAX_INT64 else 1


def _has_letter_or_digit(text: str) -> bool:
    return any(ch in _ALNUM for ch in text)


def _apply(mod: str, count: int, prefix: str) -> str:
    words = prefix.split()
    transform = _TRANSFORMS[mod]
    start = max(len(words) - count, 0)
    words[start:] = [transform(word) for word in words[start:]]
    return " ".join(words)


def convert_case(text: str) -> str:
    """Apply each case tag to the words before it, removing the tag."""
    while (match := _TAG_RE.search(text)) is not None:
        prefix = text[: match.start()].strip()
        suffix = text[match.end():]
        if not _has_letter_or_digit(prefix):
            text = prefix + suffix
            continue
        text = _apply(match.group(1), _count(match.group(2)), prefix) + suffix
    return text.strip()