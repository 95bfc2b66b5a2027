"""The full text-correction pipeline."""

from .articles import fix_articles
from .casing import convert_case
from .numbers import bin_to_dec, hex_to_dec
from .punctuation import format_punctuation
from .quotes import fix_quotes


def process_text(text: str) -> str:
    """Apply number conversion, case tags, punctuation, quotes and articles in turn."""
    text = hex_to_dec(text)
    text = bin_to_dec(text)
    text = convert_case(text)
    text = format_punctuation(text)
    text = fix_quotes(text)
    return fix_articles(text)