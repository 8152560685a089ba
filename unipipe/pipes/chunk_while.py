"""Grouping consecutive items while a predicate holds."""

from __future__ import annotations

from typing import Callable, Generic, List, Optional, TypeVar

from unipipe.output import UniPipe

T = TypeVar("T")


class ChunkWhile(UniPipe[T, List[T]], Generic[T]):
    """Collect consecutive items into chunks.

    An item joins the current chunk when the chunk is empty or when
    ``predicate(chunk, item)`` is true; otherwise the current chunk is
    emitted and a new one starts with the item. The last chunk is emitted
    when the source ends.
    """

    def __init__(self, predicate: Callable[[List[T], T], bool]) -> None:
        self._predicate = predicate
        self._chunk: List[T] = []

    def next(self, input: Optional[T]) -> Optional[List[T]]:
        if input is None:
            if not self._chunk:
                return None
            chunk, self._chunk = self._chunk, []
            return chunk

        if not self._chunk or self._predicate(self._chunk, input):
            self._chunk.append(input)
            return None

        chunk, self._chunk = self._chunk, [input]
        return chunk


__all__ = ["ChunkWhile"]