"""Line-oriented text clean-up: numbers, case tags, punctuation, quotes and articles."""

__version__ = "0.1.0"

__all__ = ["articles", "casing", "cli", "numbers", "processor", "punctuation", "quotes"]