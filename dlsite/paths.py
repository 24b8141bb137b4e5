"""Helpers that build the ``/name/value`` segments of DLsite URLs."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def segment(name: str, value: Any) -> str:
    """Return ``/name/value``."""
    return f"/{name}/{str(value)}"


def option_segment(name: str, value: Any | None) -> str:
    """Return ``/name/value``, or nothing when ``value`` is None."""
    if value is None:
        return ""
    return segment(name, value)


def array_segment(name: str, values: Iterable[Any] | None) -> str:
    """Return ``/name[0]/a/name[1]/b...``, or nothing when ``values`` is None or empty."""
    if values is None:
        return ""
    return "".join(f"/{name}[{index}]/{str(item)}" for index, item in enumerate(values))


def flag_segment(name: str, value: bool | None) -> str:
    """Return ``/name/1`` when ``value`` is true, otherwise nothing."""
    return f"/{name}/1" if value else ""