from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScoringProfile:
    """Named set of category weights used to score a location."""

    id: str
    name: str
    weights: Mapping[str, float]
    description: str = ""
