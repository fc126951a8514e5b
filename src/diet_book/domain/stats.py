"""Domain models for nutrition totals."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class MacroTotals:
    """Summed macros over a set of foods."""

    calorie: int = 0
    carbohydrate: int = 0
    protein: int = 0
    fat: int = 0


@dataclass(frozen=True)
class DailyTotals:
    """Total macros for one calendar day."""

    day: date
    totals: MacroTotals
