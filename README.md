# tinkerbox

A collection of small, self-contained teaching programs. Each one is short
enough to read in one sitting. The collection covers classic data structures,
sorting, searching and shuffling, a lotto simulator, time-of-day greetings, a
BMI calculator, a random lane race, simple tone synthesis and a tiny
in-memory pixel-drawing toolkit.

It has no runtime dependencies and needs Python 3.10 or later.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Data structures

| Module                  | Contents                                                   |
|-------------------------|------------------------------------------------------------|
| `tinkerbox.deque`       | `Deque`: a double-ended queue                              |
| `tinkerbox.linked_list` | `LinkedList`: a singly linked list                         |
| `tinkerbox.queues`      | `BoundedQueue`, `LinkedQueue`                              |
| `tinkerbox.stacks`      | `BoundedStack`, `LinkedStack`                              |
| `tinkerbox.hashmap`     | `fnv1a_index`, `SlotMap`: one value per FNV-1a hash slot   |

```python
from tinkerbox.deque import Deque

dq = Deque()
for n in range(1, 6):
    dq.push_back(n)
dq.push_front(0)
print(dq.front(), dq.back())   # 0 5
```

Misuse raises an exception; nothing returns a status code.

- `Deque` raises `IndexError` on `pop_front`, `pop_back`, `front` or `back`
  when it is empty. An optional `on_remove` callback sees every item that is
  popped or cleared.
- `LinkedList` has `insert_front`, `insert_end`, `insert_at`, `delete_front`,
  `delete_end`, `delete_at` (each delete returns the removed item),
  `search` (raises `ValueError` when nothing matches, optional `key`),
  `traverse`, `clear` and `describe`, which renders `head->1->2->(NULL)`.
- `BoundedQueue` raises `QueueFullError` and `QueueEmptyError`;
  `LinkedQueue.dequeue` raises `QueueEmptyError`, and its `describe` renders
  `back->3->2->1->front  Length: 3`.
- `BoundedStack` raises `StackFullError` and `StackEmptyError`;
  `LinkedStack.describe` renders `top->3->2->1->(NULL)`.
- `SlotMap` needs a power-of-two capacity and does no collision handling:
  two keys that hash to the same slot share it, and the later `put` wins.
  `get` on an empty slot raises `KeyError`. `len()` counts `put` calls.

## Sorting, searching and shuffling

`tinkerbox.sorting` provides:

- `sort_descending`: names in reverse lexical order.
- `find_sorted`: sorts a list and binary-searches it; returns `None` when the
  key is absent.
- `shuffle`: an in-place Fisher–Yates shuffle.
- `lucky_pick`: rows of six distinct numbers from 1 to 42.
- `ticket_matches`, `prize_for_matches` and `simulate_lotto`, which returns a
  `LottoStats` with number and prize tallies, a `ranking()` and
  `report_lines()`.

Every function that uses randomness takes an `rng` argument (anything with
`randrange`, such as `random.Random(seed)`), so results can be reproduced.

## Everyday calculators

- `tinkerbox.greetings`: `greeting_for_hour`, `spoken_time` (for example
  "It is quarter past 3."), `greet`, `greet_by_hour`, `date_report` and
  `clock_line`. Hours outside 0..23 raise `ValueError`.
- `tinkerbox.bmi`: `bmi_metric` / `classify_metric` (kilograms and
  centimetres) and `bmi_imperial` / `classify_imperial` (pounds and inches).
- `tinkerbox.racing`: `Race`, lanes stepped at random with `step()` until
  `finished()`; `run()` returns the first two lanes home (numbered from 0).

## Sound

- `tinkerbox.synth`: `note_frequency`, `waveform_length`, `sine_table`,
  `Voice` and `mix_frame`, which mixes panned wavetable voices into an
  interleaved stereo list of floats.
- `tinkerbox.tones`: `Note` (piano keys 1 to 88), `piano_frequency`,
  `chord_sample`, `encode_sample`, `track_names`, `render_track`,
  `canon_samples` and `write_tracks`, which writes each track as a
  `tmp.<name>.raw` file of two-byte samples.

## Pixels

- `tinkerbox.raster`: point lists for lines, rectangle outlines and fills,
  midpoint circles, filled circles, thick lines and polygons, with the helpers
  `sgn`, `in_rect` and `in_circle`.
- `tinkerbox.palettes`: `Color` (with `hex()` and `with_alpha()`), and the
  `GAMEBOY_PALETTE`, `GAMEBOY_GREENS` and `SWEETIE16` palettes.
- `tinkerbox.canvas`: `Canvas`, an in-memory grid of device pixels drawn on in
  square logical pixels; `pixel(x, y)` reads a colour back.
- `tinkerbox.sprites`: `Sprite`, multi-frame indexed bitmaps, with the
  `ICON`, `MAN` and `BITMAP00` sheets.
- `tinkerbox.widgets`: `Button`, `ColorPicker` and `ScrollBar`, driven by
  touch coordinates you pass in.
- `tinkerbox.paint`: `PixelEditor`, its `Tool` set and `flood_fill`.
- `tinkerbox.clocks`: `domino_pattern`, `domino_time` and `draw_domino`.
- `tinkerbox.bouncing`: `Ball` and `BouncingPolygons`, which step a ball under
  gravity and drifting polygons inside a box.

```python
from tinkerbox.raster import line_points

print(line_points(0, 0, 3, 1))   # [(0, 0), (1, 0), (2, 1), (3, 1)]
```

## Commands

```
tinkerbox-sorting sort                    # names in descending order
tinkerbox-sorting search [KEY]            # binary-search a fruit list (default: grape)
tinkerbox-sorting shuffle [--seed N]      # shuffle 0..9
tinkerbox-sorting lotto [--seed N]        # six lucky-pick rows, 6/42
tinkerbox-sorting simulate [--seed N] [--draws N]   # play a fixed ticket, then report

tinkerbox-greetings auto                  # greet and say the current time
tinkerbox-greetings greet                 # ask a name and say hello
tinkerbox-greetings hour                  # ask a name and an hour and greet
tinkerbox-greetings date                  # print the current date fields
tinkerbox-greetings clock                 # full-screen clock (curses); one line when not a terminal

tinkerbox-bmi [--imperial]                # ask weight and height, print BMI and class

tinkerbox-tones [--directory DIR] [--sample-rate RATE] [--seconds S]
```

`simulate` prints one line per draw; its default is 1,000,000 draws.

## What it does not do

- Nothing opens a window or plays sound. `Canvas` is an in-memory grid, the
  widgets, pixel editor, domino clock and bouncing toys are driven by calls
  you make, and the synth and tone modules only compute samples (`tinkerbox-tones`
  writes raw files for another program to play).
- The race has no command; it is used through the `Race` class.