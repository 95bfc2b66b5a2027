# textreloaded

`textreloaded` tidies plain text one line at a time. It reads an input file,
applies a fixed set of edits to every line and writes the result to an output
file.

## What it changes

The steps run in this order on each line:

- **Hexadecimal numbers and attached tags.** A word written directly against a
  tag is changed: `1E(hex)` becomes `30`, `Word(low)` becomes `word` and
  `word(up)` becomes `WORD`. This is repeated until nothing more changes. If a
  word is not a valid hexadecimal number, an error line is printed and the tag
  is left in place.
- **Binary numbers.** `101 (bin)` or `101(bin)` becomes `5`.
- **Case tags.** `(up)`, `(low)` and `(cap)` change the word before them and
  are removed. With a count, as in `(up, 3)`, they change that many words
  before the tag. A tag with no letter or digit before it is just dropped.
- **Punctuation.** Spaces around `. , ! ? : ;` are removed. A single space is
  then placed after a mark when a letter, digit or `-` follows. Runs of
  whitespace are collapsed to one space.
- **Quotes.** Spaces just inside `"..."` and `'...'` pairs are removed, and
  quoted passages are set apart from the surrounding words by a space.
  Apostrophes in contractions such as `don't`, `I'm` or `we've` are left alone.
- **Articles.** `a` becomes `an` before a word starting with a vowel or before
  `hour`, `honest`, `heir`, `honor` and `herb`. `an` becomes `a` before any
  other word. Single-character following words are not considered, and `and`,
  `or` and `an` count as not starting with a vowel.

## Installation

```
pip install .
```

## Command line

```
textreloaded input.txt output.txt
```

Every line of `input.txt` is processed and written to `output.txt`, each
followed by a newline. When an argument is missing, a usage line is printed;
when a file cannot be read or written, an error message is printed. In both
cases the exit status is 1. On success it prints
`Processing complete. Check output.txt` and exits with 0.

Example input:

```
Hello ,world(up)
I was sitting over    !? . there ,and then      BAMM !  !  !
```

Output:

```
Hello, WORLD
I was sitting over!?. there, and then BAMM!!!
```

## Library use

```python
from textreloaded.processor import process_text

process_text("Hello ,world!")   # 'Hello, world!'
```

Each step can also be called on its own:

- `textreloaded.numbers.hex_to_dec`
- `textreloaded.numbers.bin_to_dec`
- `textreloaded.casing.convert_case`
- `textreloaded.punctuation.format_punctuation`
- `textreloaded.quotes.fix_quotes`, which applies `fix_double_quotes` and then
  `fix_single_quotes`
- `textreloaded.articles.fix_articles`

The command itself is `textreloaded.cli.main`, which takes an optional list of
arguments and returns the exit status.

## Running the tests

```
pip install .[test]
pytest
```