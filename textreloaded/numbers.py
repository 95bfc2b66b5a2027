"""Conversion of binary and hexadecimal numbers, plus simple (low)/(up) tags."""

import re
import string

_SPACE = r"[\t\n\f\r ]"
_MAX_INT64 = 2**63 - 1
_HEX_DIGITS = frozenset(string.hexdigits)

_BIN_RE = re.compile(rf"\b([01]+){_SPACE}?\(bin\)", re.ASCII)
_LOW_RE = re.compile(rf"([A-Za-z0-9]+)\({_SPACE}*low{_SPACE}*\)")
_UP_RE = re.compile(rf"([A-Za-z0-9]+)\({_SPACE}*up{_SPACE}*\)")
_HEX_RE = re.compile(rf"([A-Za-z0-9]+)\({_SPACE}*hex{_SPACE}*\)")


def _replace_bin(match: re.Match) -> str:
    digits = match.group(1)
    value = int(digits, 2)
    if value > _MAX_INT64:
        print(f"Error: '{digits}' is not a valid bin number")
        return match.group(0)
    return str(value)


def bin_to_dec(text: str) -> str:
    """Replace every "<binary> (bin)" with its decimal value."""
    return _BIN_RE.sub(_replace_bin, text)


def _replace_hex(match: re.Match) -> str:
    word = match.group(1)
    if not all(ch in _HEX_DIGITS for ch in word) or int(word, 16) > _MAX_INT64:
        print(f"Error: '{word}' is not a valid hex number")
        return match.group(0)
    return str(int(word, 16))


def _single_pass(text: str) -> str:
    text = _LOW_RE.sub(lambda m: m.group(1).lower(), text)
    text = _UP_RE.sub(lambda m: m.group(1).upper(), text)
    return _HEX_RE.sub(_replace_hex, text)


def hex_to_dec(text: str) -> str:
    """Apply "(low)", "(up)" and "(hex)" tags repeatedly until nothing changes."""
    while (processed := _single_pass(text)) != text:
        text = processed
    return text.strip()