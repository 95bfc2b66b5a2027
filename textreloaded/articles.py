"""Correction of the indefinite articles "a" and "an"."""

from itertools import pairwise

_VOWELS = "aeiouAEIOU"
_SILENT_H_WORDS = frozenset({"hour", "honest", "heir", "honor", "herb"})
_NOT_VOWEL_SOUNDS = frozenset({"and", "or", "an"})
_AN_FORMS = frozenset({"AN", "An", "aN", "an"})


def _starts_with_vowel_sound(word: str) -> bool:
    lower = word.lower()
    if lower in _NOT_VOWEL_SOUNDS:
        return False
    return word[0] in _VOWELS or lower in _SILENT_H_WORDS


def _is_article(word: str) -> bool:
    return word.lower() in ("a", "an")


def _as_an(article: str, next_word: str) -> str:
    """Turn "a" into "an", keeping the case suggested by the article and next word."""
    if article[0].isupper():
        if len(next_word) > 1 and next_word[1].isupper():
            return "AN"
        return "An"
    return "an"


def _drop_n(article: str) -> str:
    return article[:-1] if article in _AN_FORMS else article


def _fix_line(line: str) -> str:
    words = line.split()
    fixed = list(words)
    for i, (current, following) in enumerate(pairwise(words)):
        if len(following.encode("utf-8")) <= 1:
            continue
        vowel = _starts_with_vowel_sound(following)
        if current.lower() == "a" and vowel:
            fixed[i] = _as_an(current, following)
        elif _is_article(current) and not vowel:
            fixed[i] = _drop_n(current)
    return " ".join(fixed)


def fix_articles(text: str) -> str:
    """Use "an" before vowel sounds and "a" before consonants, line by line."""
    return "\n".join(_fix_line(line) for line in text.split("\n")).strip()