"""Running pipes over plain iterables."""

from __future__ import annotations

import re
from typing import Any, Iterable, Iterator, TypeVar, Union

from unipipe.output import Output, UniPipe

T = TypeVar("T")
U = TypeVar("U")

_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def pipe_iter(source: Iterable[T], pipe: UniPipe[T, U]) -> Iterator[U]:
    """Lazily feed ``source`` through ``pipe`` and yield what it produces.

    Each item of the source is passed to ``pipe.next``; once the source is
    exhausted ``pipe.next(None)`` is called a last time. Iteration stops as
    soon as the pipe reports that it is done, leaving the rest of the
    source unread.
    """
    for item in source:
        output = Output.coerce(pipe.next(item))
        yield from output
        if output.is_done():
            return
    yield from Output.coerce(pipe.next(None))


def try_pipe_iter(
    source: Iterable[Union[T, BaseException]], pipe: UniPipe[T, U]
) -> Iterator[Union[U, BaseException]]:
    """Like :func:`pipe_iter`, for sources that carry errors as items.

    Items of the source that are exception instances are not given to the
    pipe; they are yielded unchanged, in order, and iteration goes on.
    """
    for item in source:
        if isinstance(item, BaseException):
            yield item
            continue
        output = Output.coerce(pipe.next(item))
        yield from output
        if output.is_done():
            return
    yield from Output.coerce(pipe.next(None))


def _snake_case(name: str) -> str:
    words = [
        word.lower()
        for part in re.split(r"[_\-\s]+", name)
        for word in _WORD.findall(part)
    ]
    return "_".join(words)


def pipe_method_name(method_name: str, class_name: str) -> str:
    """The conventional name of a pipe built by a given constructor.

    ``new`` gives the snake-case class name, ``new_<suffix>`` gives the
    snake-case class name followed by ``_<suffix>``, and any other name is
    put into snake case.
    """
    class_snake = _snake_case(class_name)
    if method_name == "new":
        return class_snake
    if method_name.startswith("new_"):
        return f"{class_snake}_{method_name[len('new_'):]}"
    return _snake_case(method_name)


__all__: list[Any] = ["pipe_iter", "try_pipe_iter", "pipe_method_name"]