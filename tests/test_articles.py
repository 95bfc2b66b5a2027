import pytest

from textreloaded.articles import fix_articles


def _split_first(result):
    first, rest = result.split(" ", 1)
    return first, rest


@pytest.mark.parametrize(
    "text, article",
    [
        ("a apple", "an"),
        ("A apple", "An"),
        ("A APPLE", "AN"),
        ("a hour", "an"),
        ("a honest", "an"),
        ("A Elephant", "An"),
    ],
)
def test_a_becomes_an_before_vowel_sound(text, article):
    first, rest = _split_first(fix_articles(text))
    assert first == article
    assert rest == text.split(" ", 1)[1]


@pytest.mark.parametrize(
    "text, article",
    [
        ("an banana", "a"),
        ("An Banana", "A"),
        ("AN BANANA", "A"),
        ("aN tree", "a"),
    ],
)
def test_an_becomes_a_before_consonant(text, article):
    first, rest = _split_first(fix_articles(text))
    assert first == article
    assert rest == text.split(" ", 1)[1]


@pytest.mark.parametrize("following", ["and", "or", "an"])
def test_special_words_do_not_count_as_vowels(following):
    first, rest = _split_first(fix_articles(f"an {following}"))
    assert first == "a"
    assert rest == following
    assert fix_articles(f"a {following}") == f"a {following}"


def test_single_letter_next_word_is_left_alone():
    assert fix_articles("a e") == "a e"
    assert fix_articles("an b") == "an b"


def test_correct_articles_are_unchanged():
    text = "an apple and a banana"
    assert fix_articles(text) == text


def test_lines_are_processed_separately():
    result = fix_articles("a apple\nan pear")
    lines = result.split("\n")
    assert len(lines) == 2
    assert lines[0].split()[0] == "an"
    assert lines[1].split()[0] == "a"


def test_whitespace_is_collapsed_and_trimmed():
    result = fix_articles("   a    apple   ")
    assert result.split() == ["an", "apple"]
    assert result == " ".join(result.split())


def test_idempotent():
    text = "A apple, an tree and a hour"
    once = fix_articles(text)
    assert fix_articles(once) == once


def test_empty_input():
    assert fix_articles("") == ""