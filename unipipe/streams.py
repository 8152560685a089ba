"""Running pipes over asynchronous streams."""

from __future__ import annotations

from typing import AsyncIterable, AsyncIterator, Iterable, TypeVar, Union

from unipipe.output import Output, UniPipe

T = TypeVar("T")
U = TypeVar("U")

_Source = Union[AsyncIterable[T], Iterable[T]]


async def _items(source: _Source) -> AsyncIterator[T]:
    if hasattr(source, "__aiter__"):
        async for item in source:  # type: ignore[union-attr]
            yield item
    else:
        for item in source:  # type: ignore[union-attr]
            yield item


async def pipe_stream(source: _Source, pipe: UniPipe[T, U]) -> AsyncIterator[U]:
    """Feed an asynchronous ``source`` through ``pipe`` and yield its outputs.

    A plain iterable is accepted as well. After the source is exhausted
    ``pipe.next(None)`` is called a last time. The stream ends as soon as
    the pipe reports that it is done, leaving the rest of the source unread.
    """
    items = _items(source)
    try:
        async for item in items:
            output = Output.coerce(pipe.next(item))
            for value in output:
                yield value
            if output.is_done():
                return
    finally:
        await items.aclose()
    for value in Output.coerce(pipe.next(None)):
        yield value


async def try_pipe_stream(
    source: _Source, pipe: UniPipe[T, U]
) -> AsyncIterator[Union[U, BaseException]]:
    """Like :func:`pipe_stream`, for sources that carry errors as items.

    Items that are exception instances are not given to the pipe; they are
    yielded unchanged, in order, and the stream goes on.
    """
    items = _items(source)
    try:
        async for item in items:
            if isinstance(item, BaseException):
                yield item
                continue
            output = Output.coerce(pipe.next(item))
            for value in output:
                yield value
            if output.is_done():
                return
    finally:
        await items.aclose()
    for value in Output.coerce(pipe.next(None)):
        yield value


__all__ = ["pipe_stream", "try_pipe_stream"]