"""Deterministic UNO turn engine and simulator."""

__version__ = "0.1.0"
