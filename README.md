# serialist-objects

Building blocks for algorithmic composition with MIDI, in pure Python with no dependencies:

- **`serialist_objects.segmenter`** groups incoming note on/off events into chords. A
  change to the held notes opens a segmentation window when none is running. Each further
  change during the window extends it to at least the extension period. When the window
  runs out, the held chord is returned.
- **`serialist_objects.generators`** builds flat lists of numbers from keyword commands:
  `range`, `linspace`, `ones`, `zeros`, `repeat` and `binarypattern`.
- **`serialist_objects.multilist`** is an editable list of number lists ("voices"). It
  supports reset, append, insert, replace, remove, extend and the generator keywords, and
  keeps an undo history of bounded size.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Chord segmentation

```python
from serialist_objects.segmenter import MidiNoteSegmenter, State

seg = MidiNoteSegmenter(segmentation_window_ms=60.0, extension_period_ms=30.0)
result = seg.process_input(60, 100)   # note on
assert result.state is State.SEGMENT_START
assert result.notes == [60]
chord = seg.poll()                    # None until the window has elapsed
```

- `process_input(note, velocity)` treats a velocity above 0 as note on and anything else
  as note off. It returns a `ChordAndState` (sorted held notes plus a `State`) when the
  held notes changed, otherwise `None`.
- `poll()` returns the held notes once the window has run out, otherwise `None`.
- `flush()` ends the window, releases every note and returns whether any note was held.
- The window and extension lengths can be changed through the `segmentation_window_ms`
  and `extension_period_ms` properties; negative values are clamped to 0.
- `clock` takes a function returning seconds (default `time.monotonic`), so that time can
  be controlled in tests.

`ChordThresh` wraps a segmenter behind a lock for use from more than one thread.
`handle_list([note, velocity])` or `handle_list([note, velocity, channel])` feeds one
message; the channel is ignored, and any other length raises `ValueError`. Call `tick()`
regularly from your own scheduler: at the end of a window it returns a `ChordAndState`
with state `State.SEGMENT_END`. Its notes may be empty if every note was released during
the window.

## Generators

```python
from serialist_objects import generators

generators.parse_range([4])                       # [0.0, 1.0, 2.0, 3.0]
generators.parse_range([5, 2])                    # [2.0, 3.0, 4.0]
generators.parse_linspace([4])                    # [0.0, 0.25, 0.5, 0.75]
generators.parse_binary_pattern([3, 100, 80])     # [100.0, 80.0, 80.0]
generators.generate(generators.VecKeyword.ONES, [3])   # [1.0, 1.0, 1.0]
generators.generate("repeat", [2, 7])             # [7.0, 7.0]
```

`parse_keyword(args)` recognises a keyword (case-insensitively) in the first argument and
returns `None` otherwise. `transposed(values)` wraps every value in its own list. Invalid
arguments raise `GeneratorError`, a subclass of `ValueError`.

## Multilist

```python
from serialist_objects.multilist import Multilist

ml = Multilist()
ml.append([60, 64, 67])     # returns the formatted state: ["[", 60.0, 64.0, 67.0, "]"]
ml.generate("range", 3)     # replaces the contents with [[0.0], [1.0], [2.0]]
ml.undo()                   # back to [[60.0, 64.0, 67.0]]
len(ml)                     # 1
```

- The constructor takes an initial value: nested lists, plain numbers, bracketed atoms
  such as `["[", 1, 2, "]", 3]`, or a generator call such as `["range", 4]`.
- Methods that change the contents return `format()`, the state as a flat list of atoms.
  Single-valued lists are written as plain numbers, longer ones between `"["` and `"]"`,
  empty ones as `"null"`. An empty multilist formats as `["null"]`.
- `set` and `set_singular` change the contents without returning anything.
- `insert` accepts negative indices (`-1` appends). An index past the end pads with empty
  lists, up to 1024 of them.
- `remove(*indices)` removes nothing if any index is invalid.
- `replace` is not recorded in the undo history. All other changes are, up to
  `max_history` states (default 100).
- `value` returns a copy of the contents; iterating yields copies of each list.

An index outside the list raises `IndexOutOfBounds` (both a `MultilistError` and an
`IndexError`). Other invalid input raises `MultilistError`.

## What this package does not do

There is no command-line tool and no MIDI input or output: notes come in as plain
numbers, results are returned as Python values, and you drive `ChordThresh.tick()`
from your own timer. The multilist has no modulo-range (`modrange`) generator; only the
six keywords listed above are available.