"""Pipe outputs and the pipe protocol."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class OutputKind(enum.Enum):
    """What a single step of a pipe produced."""

    NEXT = "next"
    ONE = "one"
    MANY = "many"
    DONE = "done"
    DONE_WITH_ONE = "done_with_one"
    DONE_WITH_MANY = "done_with_many"


_DONE_KINDS = frozenset(
    {OutputKind.DONE, OutputKind.DONE_WITH_ONE, OutputKind.DONE_WITH_MANY}
)

_FINISHED_KIND = {
    OutputKind.NEXT: OutputKind.DONE,
    OutputKind.ONE: OutputKind.DONE_WITH_ONE,
    OutputKind.MANY: OutputKind.DONE_WITH_MANY,
}


class UniPipe(ABC, Generic[T, U]):
    """A stateful step that turns inputs into outputs.

    ``next`` is called with each input in turn and with ``None`` once the
    source is exhausted. It may return an :class:`Output`, ``None`` (no
    output yet) or a plain value (exactly one output).
    """

    @abstractmethod
    def next(self, input: T | None) -> Any:
        """Feed one input, or ``None`` at the end, and return the result."""


@dataclass(frozen=True)
class Output(Generic[T]):
    """The result of one pipe step: zero, one or many values, maybe final."""

    kind: OutputKind
    values: tuple = ()

    @classmethod
    def next(cls) -> Output[T]:
        """Nothing produced; ask for the next input."""
        return cls(OutputKind.NEXT)

    @classmethod
    def one(cls, value: T) -> Output[T]:
        """Exactly one value produced."""
        return cls(OutputKind.ONE, (value,))

    @classmethod
    def many(cls, values: Iterable[T]) -> Output[T]:
        """Any number of values produced."""
        return cls(OutputKind.MANY, tuple(values))

    @classmethod
    def done(cls) -> Output[T]:
        """Nothing produced and the pipe is finished."""
        return cls(OutputKind.DONE)

    @classmethod
    def done_with_one(cls, value: T) -> Output[T]:
        """One last value produced and the pipe is finished."""
        return cls(OutputKind.DONE_WITH_ONE, (value,))

    @classmethod
    def done_with_many(cls, values: Iterable[T]) -> Output[T]:
        """Last values produced and the pipe is finished."""
        return cls(OutputKind.DONE_WITH_MANY, tuple(values))

    @classmethod
    def coerce(cls, value: Any) -> Output[Any]:
        """Turn a pipe's return value into an Output.

        An Output is returned as is, ``None`` means nothing was produced and
        anything else is a single value.
        """
        if isinstance(value, Output):
            return value
        if value is None:
            return cls.next()
        return cls.one(value)

    def is_done(self) -> bool:
        """Whether the pipe reported that it is finished."""
        return self.kind in _DONE_KINDS

    def map(self, callback: Callable[[T], U]) -> Output[U]:
        """Apply ``callback`` to every value, keeping the kind."""
        return Output(self.kind, tuple(callback(value) for value in self.values))

    def pipe(self, pipe: UniPipe[T, U]) -> Output[U]:
        """Feed these values into another pipe and collect what it produces."""
        upper_done = self.is_done()

        if self.kind is OutputKind.NEXT:
            output: Output[U] = Output.next()
        elif self.kind in (OutputKind.ONE, OutputKind.DONE_WITH_ONE):
            output = Output.coerce(pipe.next(self.values[0]))
        elif self.kind in (OutputKind.MANY, OutputKind.DONE_WITH_MANY):
            inputs: list[Any] = list(self.values)
            if upper_done:
                inputs.append(None)

            aggregated: list[U] = []
            for value in inputs:
                step = Output.coerce(pipe.next(value))
                aggregated.extend(step)
                if step.is_done():
                    return Output.done_with_many(aggregated)

            output = Output.many(aggregated)
        else:
            output = Output.coerce(pipe.next(None))

        return output.finished() if upper_done else output

    def finished(self) -> Output[T]:
        """The same values, marked as final."""
        kind = _FINISHED_KIND.get(self.kind)
        if kind is None:
            return self
        return Output(kind, self.values)

    def __iter__(self) -> Iterator[T]:
        return iter(self.values)