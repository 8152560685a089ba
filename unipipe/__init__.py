"""Stateful pipes that drive iterators and async iterators alike."""

__version__ = "0.2.11"