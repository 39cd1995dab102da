# linearstructs

Small implementations of the classic linear data structures, together with
a handful of programs that put them to work. No third-party libraries are
needed.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The data structures

| Module | What it holds |
| --- | --- |
| `linearstructs.stack` | `Stack`: last-in, first-out container whose capacity doubles when full |
| `linearstructs.queue` | `Queue`: first-in, first-out container over a growable circular buffer |
| `linearstructs.deque` | `Deque`: double-ended queue, plus `normalize()` for wrapping indexes |
| `linearstructs.ordered_set` | `OrderedSet`: sorted set with union (`|`), intersection (`&`) and difference (`-`) |
| `linearstructs.node` | `Node` and the functions `insert`, `copy`, `find`, `remove`, `iterate` and `format_list` for doubly linked lists |
| `linearstructs.sort_insertion` | `sort_insertion()`, an in-place insertion sort built on linked nodes, and `sorted_insert()` |
| `linearstructs.dollars` | `Dollars`: money held as whole cents, with `parse()` and `from_amount()` |
| `linearstructs.card` | `Card`: a card of the children's Go Fish deck |

A short taste:

```python
from linearstructs.stack import Stack
from linearstructs.ordered_set import OrderedSet
from linearstructs.dollars import Dollars
from linearstructs.infix import convert_infix_to_postfix

s = Stack()
s.push(1)
s.push(2)
s.top()          # 2

a = OrderedSet([3, 1, 2])
b = OrderedSet([2, 4])
list(a | b)      # [1, 2, 3, 4]
list(a & b)      # [2]
list(a - b)      # [1, 3]

str(Dollars.parse("$(4.211)"))   # '$(4.21)'

convert_infix_to_postfix("5 + 2")   # ' 5 2 +'
```

Reading from an empty `Stack`, `Queue` or `Deque` (`top()`, `front()`,
`back()`) raises `IndexError`; popping from an empty one does nothing.

## Programs

Each program reads from standard input and writes to standard output.

* `linearstructs-infix` turns infix equations such as `5 + 2` into postfix
  (`5 2 +`), one per line; type `quit` to stop. With `-a` / `--assembly` it
  prints a small assembly listing (`SET`/`LOD`, the operation, `SAV`) instead.
* `linearstructs-stock` keeps a first-in, first-out portfolio of share lots.
  Commands are `buy 200 $1.57`, `sell 150 $2.15`, `display` and `quit`.
  Selling more shares than are held prints an error and changes nothing.
* `linearstructs-now-serving` simulates a help-desk line, one input line per
  minute. Enter `<class> <name> <minutes>` for a request, prefix it with `!!`
  for an emergency (served right after the current request), `none` to let a
  minute pass, and `finished` to end.
* `linearstructs-go-fish [HAND]` plays five rounds of Go Fish against the
  card names in the file `HAND` (default `hand.txt`), reading one guess per
  word of input, then lists the cards left in the hand. It exits with status
  1 if the hand file cannot be read.

The same sessions can be driven from Python: `linearstructs.stock.run` and
`linearstructs.now_serving.run` take an iterable of lines and an output
stream, and `linearstructs.go_fish.play` takes a hand, the guesses and an
output stream and returns a `GoFishResult`.

## What it does not do

The programs keep nothing between runs: the stock portfolio and the
help-desk line live only as long as one session, and Go Fish never writes
back to the hand file.