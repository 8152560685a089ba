# unipipe

A pipe is a small stateful object that receives input items one at a time
and decides what to emit. The same pipe can drive a plain iterator or an
async iterator, with or without exception items mixed into the input.

## Installation

```
pip install .
```

The package has no runtime dependencies.

## Writing a pipe

Subclass `unipipe.output.UniPipe` and implement `next(input)`. It is called
with each input item, and once more with `None` when the source ends. It
returns an `Output`, a single value, or `None`:

- `None` or `Output.next()` – nothing to emit yet
- a plain value or `Output.one(value)` – emit one value
- `Output.many(values)` – emit several values
- `Output.done()`, `Output.done_with_one(value)`, `Output.done_with_many(values)`
  – emit what is given and stop; no further input is read

Because `None` marks the end of the source, a source should not contain
`None` items, and a pipe emits a `None` value only through an explicit
`Output`.

```python
from unipipe.output import UniPipe


class SumFive(UniPipe):
    def __init__(self):
        self.total = 0

    def next(self, input):
        if input is None:
            return self.total or None
        self.total += input
        if self.total >= 5:
            total, self.total = self.total, 0
            return total
        return None
```

## Running a pipe

```python
from unipipe.iterators import pipe_iter, try_pipe_iter

list(pipe_iter([1, 1 + 1, 3, 4, 5, 1], SumFive()))   # [6, 9, 1]
```

- `pipe_iter(source, pipe)` lazily yields the pipe's outputs for an iterable.
- `try_pipe_iter(source, pipe)` does the same for a source whose items may be
  exception instances: each such item is yielded unchanged, in its place,
  and is not given to the pipe; the pipe keeps receiving the items after it.

In `unipipe.streams`, `pipe_stream(source, pipe)` and
`try_pipe_stream(source, pipe)` behave the same way but return async
iterators. They accept an async iterable or a plain iterable:

```python
from unipipe.streams import pipe_stream


async def collect(source):
    return [value async for value in pipe_stream(source, SumFive())]
```

In all four, once the pipe returns a "done" output its values are emitted
and the rest of the source is left unread.

`unipipe.iterators.pipe_method_name(method_name, class_name)` gives the
conventional snake-case name for a pipe built by a constructor: `"new"`
gives the class name in snake case (`SumFive` → `sum_five`), `"new_<suffix>"`
appends `_<suffix>`, and any other name is put into snake case.

## The `Output` type

`unipipe.output.Output` is a frozen dataclass with a `kind`
(`OutputKind.NEXT`, `ONE`, `MANY`, `DONE`, `DONE_WITH_ONE`, `DONE_WITH_MANY`)
and a tuple of `values`. Besides the constructors above it offers:

- `Output.coerce(value)` – turns a pipe's return value into an `Output`.
- `is_done()` – whether the kind is one of the "done" kinds.
- `finished()` – the same values with the kind marked as done.
- `map(callback)` – applies `callback` to each value, keeping the kind.
- `pipe(other)` – feeds the values into another pipe and returns what it
  emits; if this output is done, the other pipe also receives `None` and the
  result is marked done.
- iterating an `Output` yields its values.

`map` and `pipe` let a pipe be built from other pipes, for example
`return self.inner.next(input).pipe(self.second)`.

## Bundled pipes

The `unipipe.pipes` package holds ready-made pipes:

- `unipipe.pipes.chunk_while.ChunkWhile(predicate)` – groups consecutive
  items; an item joins the current chunk when `predicate(chunk, item)` is
  true, otherwise the chunk is emitted and a new one starts.
- `unipipe.pipes.chunk_by.ChunkBy(key)` – groups consecutive items whose key
  equals that of the chunk's first item.
- `unipipe.pipes.window_by_offset.WindowByOffset(window_size, window_step,
  offset_callback)` – emits `(items, (start, end))` windows, end exclusive,
  over items ordered by offset. `WindowByOffset.with_options(...)` takes a
  `WindowByOffsetOptions(align_window_start=..., ignore_empty_windows=...)`
  to start windows at multiples of the step or to skip empty windows.

```python
from unipipe.iterators import pipe_iter
from unipipe.pipes.chunk_by import ChunkBy

list(pipe_iter([1, 1, 2, 2, 2, 3], ChunkBy(lambda item: item % 2)))
# [[1, 1], [2, 2, 2], [3]]
```

## What it does not do

Pipes are run through the functions above; the package does not add
methods to iterators or async iterators.

## Running the tests

```
pip install -e ".[test]"
pytest
```