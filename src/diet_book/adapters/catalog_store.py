"""Text file source for the food catalog."""

import logging
from dataclasses import dataclass
from pathlib import Path

from diet_book.adapters.text_records import read_records
from diet_book.domain.catalog import FoodCatalog, Store
from diet_book.domain.food import Food
from diet_book.errors import CorruptRecordError, DataFileNotFoundError, DietBookError

_FIELD_COUNT = 6

_logger = logging.getLogger(__name__)


@dataclass
class TextCatalogStore:
    """Reads the catalog as one delimited line per food.

    Field order: store, name, calorie, carbohydrate, protein, fat. Lines of
    the same store may be spread through the file; stores keep the order in
    which they first appear.
    """

    path: Path

    def load(self) -> FoodCatalog:
        if not self.path.exists():
            raise DataFileNotFoundError(f"Food catalog file {self.path} not found.")
        grouped: dict[str, list[Food]] = {}
        for line_number, row in read_records(self.path):
            store, food = _parse_row(row, self.path, line_number)
            grouped.setdefault(store, []).append(food)
        catalog = FoodCatalog(
            tuple(Store(name, tuple(foods)) for name, foods in grouped.items())
        )
        _logger.info(
            "Loaded %s catalog stores from %s", len(catalog.stores), self.path
        )
        return catalog


def _parse_row(row: list[str], path: Path, line_number: int) -> tuple[str, Food]:
    if len(row) != _FIELD_COUNT:
        raise CorruptRecordError(
            path, line_number, f"expected {_FIELD_COUNT} fields, found {len(row)}"
        )
    store, name, calorie, carbohydrate, protein, fat = (value.strip() for value in row)
    if not store or not name:
        raise CorruptRecordError(path, line_number, "store and food name are required")
    try:
        food = Food(
            name=name,
            calorie=int(calorie),
            carbohydrate=int(carbohydrate),
            protein=int(protein),
            fat=int(fat),
        )
    except (ValueError, DietBookError) as exc:
        raise CorruptRecordError(path, line_number, str(exc)) from exc
    return store, food
