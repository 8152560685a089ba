"""Sliding windows over items placed by an offset."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Generic, List, Optional, Tuple, TypeVar

from unipipe.output import Output, UniPipe

T = TypeVar("T")

Window = Tuple[List[Any], Tuple[Any, Any]]


def _rem(dividend: Any, divisor: Any) -> Any:
    """Remainder with the sign of the dividend (truncating division)."""
    if isinstance(dividend, int) and isinstance(divisor, int):
        remainder = abs(dividend) % abs(divisor)
        return -remainder if dividend < 0 else remainder
    if isinstance(dividend, float) or isinstance(divisor, float):
        return math.fmod(dividend, divisor)
    return dividend % divisor


@dataclass(frozen=True)
class WindowByOffsetOptions:
    """Options for :class:`WindowByOffset`.

    ``align_window_start`` makes windows start at multiples of the window
    step instead of at the offset of the first item. ``ignore_empty_windows``
    skips windows that hold no item.
    """

    align_window_start: bool = False
    ignore_empty_windows: bool = False


class WindowByOffset(UniPipe[T, Window], Generic[T]):
    """Emit windows of ``window_size`` advancing by ``window_step``.

    Items are expected in order of their offset. Each output is a pair of
    the window's items and its ``(start, end)`` range, end exclusive.
    """

    def __init__(
        self,
        window_size: Any,
        window_step: Any,
        offset_callback: Callable[[T], Any],
        options: Optional[WindowByOffsetOptions] = None,
    ) -> None:
        options = options or WindowByOffsetOptions()
        self._window_size = window_size
        self._window_step = window_step
        self._offset_callback = offset_callback
        self._align_window_start = options.align_window_start
        self._ignore_empty_windows = options.ignore_empty_windows
        self._window: Deque[T] = deque()
        self._window_start: Any = None

    @classmethod
    def with_options(
        cls,
        window_size: Any,
        window_step: Any,
        offset_callback: Callable[[T], Any],
        options: WindowByOffsetOptions,
    ) -> "WindowByOffset[T]":
        """Build a pipe with explicit options."""
        return cls(window_size, window_step, offset_callback, options)

    def next(self, input: Optional[T]) -> Output[Window]:
        if input is None:
            return self._finish()

        item_offset = self._offset_callback(input)

        if self._window_start is None:
            if self._align_window_start:
                self._window_start = item_offset - _rem(item_offset, self._window_step)
            else:
                self._window_start = item_offset
            self._window.append(input)
            return Output.next()

        window_start = self._window_start
        outputs: List[Window] = []

        while True:
            window_end = window_start + self._window_size

            # The current window still overlaps the item: wait for more input.
            if window_end > item_offset:
                break

            window = list(self._window)

            if self._ignore_empty_windows and not window:
                # Jump straight to the first window that can hold the item.
                window_start = (
                    item_offset
                    - _rem(item_offset - window_end, self._window_step)
                    + self._window_step
                    - self._window_size
                )
                self._window_start = window_start
                break

            outputs.append((window, (window_start, window_end)))

            window_start = window_start + self._window_step
            self._window_start = window_start

            while self._window and self._offset_callback(self._window[0]) < window_start:
                self._window.popleft()

        self._window.append(input)
        return Output.many(outputs)

    def _finish(self) -> Output[Window]:
        if not self._window:
            return Output.done()
        window = list(self._window)
        self._window.clear()
        start = self._window_start
        return Output.done_with_one((window, (start, start + self._window_size)))


__all__ = ["WindowByOffset", "WindowByOffsetOptions"]