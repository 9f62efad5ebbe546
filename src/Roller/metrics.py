"""Minimal in-process metrics shim for counters.

Counters live for the process lifetime; tests reset them between cases.
"""

from __future__ import annotations

from collections import defaultdict

_counters: dict[str, int] = defaultdict(int)


def inc_counter(name: str, value: int = 1) -> None:
    _counters[name] += int(value)


def get_counter(name: str) -> int:
    return _counters.get(name, 0)


def get_counters() -> dict[str, int]:
    return dict(_counters)


def reset_counters() -> None:
    _counters.clear()
