"""Spacing around single and double quotation marks."""

import re

_SPACE = r"[\t\n\f\r ]"
_WORD = r"[A-Za-z0-9_']"

_DOUBLE_INNER_RE = re.compile(rf'"{_SPACE}*(.*?){_SPACE}*"')
_DOUBLE_AFTER_RE = re.compile(rf'(["]){_SPACE}+({_WORD})')
_DOUBLE_BEFORE_RE = re.compile(rf'({_WORD}){_SPACE}+(["])')

_SINGLE_INNER_RE = re.compile(rf"'{_SPACE}*(.*?){_SPACE}*'")
_SINGLE_AFTER_RE = re.compile(rf"(['])({_SPACE}+)({_WORD})")
_SINGLE_BEFORE_RE = re.compile(rf"({_WORD}){_SPACE}+(['])")

_LETTERS_RE = re.compile(r"[A-Za-z]*")
_TRAILING_LETTERS_RE = re.compile(r"[A-Za-z]*\Z")

_NO_SPACE_NEEDED = frozenset(" .,;!?")
_CONTRACTION_SUFFIXES = frozenset({"t", "ll", "ve", "m", "s", "d", "re"})


def _needs_space_after(text: str, i: int) -> bool:
    return i + 1 < len(text) and text[i + 1] not in _NO_SPACE_NEEDED


def fix_double_quotes(text: str) -> str:
    """Tighten double-quoted passages and space them from the words around them."""
    text = _DOUBLE_INNER_RE.sub(r'"\1"', text)
    text = _DOUBLE_AFTER_RE.sub(r"\1\2", text)
    text = _DOUBLE_BEFORE_RE.sub(r"\1\2", text)

    total = text.count('"')
    result: list[str] = []
    emitted = 0
    in_quote = False
    for i, ch in enumerate(text):
        if ch != '"':
            result.append(ch)
            continue
        if total % 2 and emitted == total - 1:
            result.append('" ')
        elif not in_quote:
            in_quote = True
            if i > 0 and text[i - 1] not in " \"'":
                result.append(" ")
            result.append(ch)
        else:
            in_quote = False
            result.append(ch)
            if _needs_space_after(text, i):
                result.append(" ")
        emitted += 1
    return "".join(result).strip()


def _is_contraction(text: str, i: int) -> bool:
    if not 0 < i < len(text) - 1:
        return False
    before = _TRAILING_LETTERS_RE.search(text, 0, i).group()
    after = _LETTERS_RE.match(text, i + 1).group()
    return bool(before) and after in _CONTRACTION_SUFFIXES


def fix_single_quotes(text: str) -> str:
    """Tighten single-quoted passages, leaving apostrophes in contractions alone."""
    text = _SINGLE_INNER_RE.sub(r"'\1'", text)
    text = _SINGLE_AFTER_RE.sub(r"\1\3", text)
    text = _SINGLE_BEFORE_RE.sub(r"\1\2", text)

    total = text.count("'")
    result: list[str] = []
    emitted = 0
    in_quote = False
    for i, ch in enumerate(text):
        if ch != "'":
            result.append(ch)
            continue
        emitted_before = emitted
        emitted += 1
        if _is_contraction(text, i):
            result.append(ch)
        elif total == 1 or (total % 2 and emitted_before == total - 1 and not in_quote):
            result.append(ch)
            if _needs_space_after(text, i):
                result.append(" ")
        elif not in_quote:
            in_quote = True
            if i > 0 and text[i - 1] not in " '\"":
                result.append(" ")
            result.append(ch)
        else:
            in_quote = False
            result.append(ch)
            if _needs_space_after(text, i):
                result.append(" ")
    return "".join(result).strip()


def fix_quotes(text: str) -> str:
    """Fix double quotes, then single quotes."""
    return fix_single_quotes(fix_double_quotes(text))