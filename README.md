# katas

A collection of small, self-contained exercises. Each one lives in its own
module of the `katas` package. There are no runtime dependencies.

## Installation

```
pip install .
```

To run the tests, install the test extra and then run pytest:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it does |
| --- | --- |
| `katas.proverb` | `proverb(rhymes)` returns the lines of the "for want of a nail" proverb |
| `katas.raindrops` | `convert(number)` returns Pling/Plang/Plong for the factors 3, 5 and 7, or the number itself |
| `katas.rna_transcription` | `to_rna(dna)` returns the RNA complement of a DNA strand and drops unknown nucleotides |
| `katas.robot_name` | `Robot.name()` assigns a unique random name such as `AB123`, and `Robot.reset()` clears it |
| `katas.roman_numerals` | `to_roman(number)` converts 1 to 3000 |
| `katas.rotational_cipher` | `rotate(text, shift)` shifts letters and leaves other characters alone |
| `katas.run_length_encoding` | `encode(text)` and `decode(text)` |
| `katas.scale_generator` | `scale(tonic, interval)` builds musical scales; an empty interval gives the chromatic scale |
| `katas.scrabble` | `score(word)` returns the Scrabble score of a word |
| `katas.secret_handshake` | `handshake(code)` turns the bits of a number into actions |
| `katas.series` | `all_series`, `first` and `unsafe_first` return substrings of a fixed length |
| `katas.simple_cipher` | `caesar()`, `shift(distance)` and `vigenere(key)` return a `Cipher` with `encode` and `decode` |
| `katas.space_age` | `age(seconds, planet)` gives an age in the years of a `Planet` |
| `katas.strain` | `keep(items, predicate)` and `discard(items, predicate)` |
| `katas.sum_of_multiples` | `sum_multiples(limit, *divisors)` sums the distinct multiples below a limit |
| `katas.tournament` | `tally(source, sink)` reads result lines and writes a league table |
| `katas.tree_building` | `build(records)` turns `Record`s into a tree of `Node`s |
| `katas.triangle` | `kind_from_sides(a, b, c)` returns a `Kind` |
| `katas.twelve_days` | `song()` and `verse(day)` |
| `katas.two_fer` | `share_with(name)` |
| `katas.word_count` | `word_count(sentence)` returns a `Counter` of lowercased words |

## Examples

```python
import io

from katas.roman_numerals import to_roman
from katas.simple_cipher import caesar
from katas.robot_name import Robot
from katas.tournament import tally
from katas.word_count import word_count

to_roman(1024)                    # "MXXIV"
caesar().encode("venividivici")   # "yhqlylglylfl"
word_count("go Go GO Stop stop")  # Counter({"go": 3, "stop": 2})

robot = Robot()
robot.name()                      # e.g. "QX042"; the same on every call until reset()

table = io.StringIO()
tally(["Allegoric Alaskians;Blithering Badgers;win"], table)
print(table.getvalue())
```

`tally` reads any iterable of lines, such as an open text file. Blank lines and
lines starting with `#` are skipped.

## Errors

Functions that cannot handle their input raise exceptions:

- `to_roman` raises `ValueError` outside 1 to 3000.
- `unsafe_first` raises `ValueError` when the text is too short; `first` returns `None` instead.
- `shift` raises `ValueError` for a distance of 0 or beyond ±25, and `vigenere`
  for a key shorter than three letters or one that is not all lowercase letters.
- `verse` raises `ValueError` for a day outside 1 to 12.
- `scale` raises `ValueError` for an empty tonic.
- `tally` raises `TallyError` (a `ValueError`) for a malformed line or an unknown outcome.
- `build` raises `TreeError` (a `ValueError`) when the records do not form a tree.
- `Robot.name` raises `NamesExhaustedError` once every possible name is taken.

## What it does not do

The package is a library only: it has no command-line interface. Robot names
are remembered in memory for the life of the process and are not stored anywhere.