"""Text file persistence for the food log."""

import logging
from dataclasses import dataclass
from pathlib import Path

from diet_book.adapters.text_records import read_records, write_records
from diet_book.domain.food import (
    DatedFoodEntry,
    Food,
    FoodEntry,
    PlainFoodEntry,
    format_timestamp,
    parse_timestamp,
)
from diet_book.errors import CorruptRecordError, DataFileNotFoundError, DietBookError
from diet_book.services.food_list import FoodList

_FIELD_COUNT = 7

_logger = logging.getLogger(__name__)


@dataclass
class TextFoodListStore:
    """Reads and writes a FoodList as one delimited line per entry.

    Field order: name, calorie, carbohydrate, protein, fat, portion size,
    timestamp. The timestamp is empty for entries without a date.
    """

    path: Path

    def load(self) -> FoodList:
        """Rebuild a FoodList from the file, or fail without partial results."""
        if not self.path.exists():
            raise DataFileNotFoundError(f"Food list file {self.path} not found.")
        entries = [
            _parse_row(row, self.path, line_number)
            for line_number, row in read_records(self.path)
        ]
        _logger.info("Loaded %s food entries from %s", len(entries), self.path)
        return FoodList(entries)

    def save(self, food_list: FoodList) -> None:
        """Overwrite the file with every entry in the list."""
        write_records(self.path, (_to_row(entry) for entry in food_list))
        _logger.info("Saved %s food entries to %s", food_list.size(), self.path)


def _to_row(entry: FoodEntry) -> list[str]:
    food = entry.food
    timestamp = (
        format_timestamp(entry.date_time) if isinstance(entry, DatedFoodEntry) else ""
    )
    return [
        food.name,
        str(food.calorie),
        str(food.carbohydrate),
        str(food.protein),
        str(food.fat),
        str(entry.portion_size),
        timestamp,
    ]


def _parse_row(row: list[str], path: Path, line_number: int) -> FoodEntry:
    if len(row) != _FIELD_COUNT:
        raise CorruptRecordError(
            path, line_number, f"expected {_FIELD_COUNT} fields, found {len(row)}"
        )
    name, calorie, carbohydrate, protein, fat, portion, timestamp = row
    try:
        food = Food(
            name=name,
            calorie=int(calorie),
            carbohydrate=int(carbohydrate),
            protein=int(protein),
            fat=int(fat),
        )
        portion_size = int(portion)
        if not timestamp.strip():
            return PlainFoodEntry(food, portion_size)
        return DatedFoodEntry(
            food, portion_size, date_time=parse_timestamp(timestamp)
        )
    except (ValueError, DietBookError) as exc:
        raise CorruptRecordError(path, line_number, str(exc)) from exc
