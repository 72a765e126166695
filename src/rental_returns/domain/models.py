"""Domain dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vehicle:
    model: str


@dataclass(frozen=True, slots=True)
class Location:
    """A rental branch, identified only by its name."""

    name: str
