"""Grouping consecutive items that share a key."""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Optional, TypeVar

from unipipe.output import UniPipe
from unipipe.pipes.chunk_while import ChunkWhile

T = TypeVar("T")


class ChunkBy(UniPipe[T, List[T]], Generic[T]):
    """Collect consecutive items whose key equals that of the chunk's first item."""

    def __init__(self, identifier_callback: Callable[[T], Any]) -> None:
        self._chunk_while: ChunkWhile[T] = ChunkWhile(
            lambda chunk, item: identifier_callback(chunk[0])
            == identifier_callback(item)
        )

    def next(self, input: Optional[T]) -> Optional[List[T]]:
        return self._chunk_while.next(input)


__all__ = ["ChunkBy"]