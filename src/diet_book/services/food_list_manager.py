"""Pure transformations over sequences of food entries.

Every function here takes a borrowed sequence and returns a new value. The
only exception is ``delete_at``, the removal primitive used by ``FoodList``,
which mutates the list it is explicitly handed.

Date-only functions take ``Sequence[DatedFoodEntry]``. Callers holding
mixed entries keep the dated ones with ``select_dated``.
"""

from collections.abc import Sequence
from datetime import datetime

from diet_book.domain.food import DatedFoodEntry, Food, FoodEntry
from diet_book.errors import IndexOutOfRangeError


def select_dated(entries: Sequence[FoodEntry]) -> list[DatedFoodEntry]:
    """Return only the dated entries, in order."""
    return [entry for entry in entries if isinstance(entry, DatedFoodEntry)]


def render_numbered(entries: Sequence[FoodEntry]) -> str:
    """Render entries one per line, numbered from 1."""
    return "".join(f"  {i}. {entry}\n" for i, entry in enumerate(entries, start=1))


def render_numbered_dated(entries: Sequence[DatedFoodEntry]) -> str:
    """Render dated entries one per line with their timestamps."""
    return "".join(
        f"  {i}. {entry.to_dated_string()}\n" for i, entry in enumerate(entries, start=1)
    )


def delete_at(entries: list[FoodEntry], index: int) -> FoodEntry:
    """Remove and return the entry at a 1-based index."""
    if index < 1 or index > len(entries):
        raise IndexOutOfRangeError(index, len(entries))
    return entries.pop(index - 1)


def to_strings(entries: Sequence[FoodEntry]) -> list[str]:
    return [str(entry) for entry in entries]


def to_foods(entries: Sequence[FoodEntry]) -> list[Food]:
    """Return the unscaled food of each entry."""
    return [entry.food for entry in entries]


def to_portioned_foods(entries: Sequence[FoodEntry]) -> list[Food]:
    """Return each entry's food with its macros multiplied by the portion size."""
    return [entry.food.scaled(entry.portion_size) for entry in entries]


def to_timestamps(entries: Sequence[DatedFoodEntry]) -> list[datetime]:
    return [entry.date_time for entry in entries]


def to_portion_sizes(entries: Sequence[FoodEntry]) -> list[int]:
    return [entry.portion_size for entry in entries]


def filter_since(
    entries: Sequence[DatedFoodEntry], cutoff: datetime
) -> list[DatedFoodEntry]:
    """Keep entries logged at or after cutoff."""
    return [entry for entry in entries if entry.date_time >= cutoff]


def filter_range(
    entries: Sequence[DatedFoodEntry], start: datetime, end: datetime
) -> list[DatedFoodEntry]:
    """Keep entries logged between start and end, both inclusive."""
    assert start < end, "End time should be later than start time."
    return [entry for entry in entries if start <= entry.date_time <= end]


def sort_by_date(entries: Sequence[DatedFoodEntry]) -> list[DatedFoodEntry]:
    """Return the entries in ascending time order, keeping ties in place."""
    return sorted(entries, key=lambda entry: entry.date_time)
