"""Shared test fixtures."""

import io
from dataclasses import dataclass, field
from datetime import datetime

import pytest

from diet_book.config import Settings
from diet_book.containers import AppContainer, build_container
from diet_book.domain.catalog import FoodCatalog, Store
from diet_book.domain.food import DatedFoodEntry, Food, PlainFoodEntry
from diet_book.domain.person import Person
from diet_book.errors import CorruptRecordError, DataFileNotFoundError
from diet_book.services.food_list import FoodList
from diet_book.services.session import (
    CatalogRepository,
    FoodListRepository,
    PersonRepository,
    SessionManager,
)
from diet_book.ui import Ui

APPLE = Food("Apple", calorie=50, carbohydrate=14, protein=0, fat=0)
RICE = Food("Rice", calorie=200, carbohydrate=45, protein=4, fat=1)
CHICKEN = Food("Chicken breast", calorie=165, carbohydrate=0, protein=31, fat=4)
BANANA = Food("Banana", calorie=89, carbohydrate=23, protein=1, fat=0)
KOPI = Food("Kopi", calorie=140, carbohydrate=20, protein=2, fat=5)
APPLE_JUICE = Food("Apple", calorie=110, carbohydrate=26, protein=2, fat=0)
CATALOG = FoodCatalog(
    (
        Store("Fruit Stall", (APPLE, BANANA)),
        Store("Drinks Stall", (KOPI, APPLE_JUICE)),
    )
)


def dated(food: Food, portion: int, when: str) -> DatedFoodEntry:
    """Build a dated entry from an ISO minute timestamp."""
    return DatedFoodEntry(food, portion, date_time=datetime.fromisoformat(when))


def plain(food: Food, portion: int = 1) -> PlainFoodEntry:
    return PlainFoodEntry(food, portion)


@dataclass
class InMemoryFoodListRepository(FoodListRepository):
    """In-memory food list repository for tests."""

    stored: list | None = None
    corrupt: bool = False
    saves: int = 0

    def load(self) -> FoodList:
        if self.corrupt:
            raise CorruptRecordError("FoodList.txt", 1, "expected 7 fields, found 2")
        if self.stored is None:
            raise DataFileNotFoundError("Food list file not found.")
        return FoodList(self.stored)

    def save(self, food_list: FoodList) -> None:
        self.stored = list(food_list.as_sequence())
        self.saves += 1


@dataclass
class InMemoryPersonRepository(PersonRepository):
    """In-memory profile repository for tests."""

    stored: Person | None = None
    saves: list[Person] = field(default_factory=list)

    def load(self) -> Person:
        if self.stored is None:
            raise DataFileNotFoundError("Person data file not found.")
        return self.stored

    def save(self, person: Person) -> None:
        self.stored = person
        self.saves.append(person)


@dataclass
class InMemoryCatalogRepository(CatalogRepository):
    """In-memory catalog source for tests."""

    catalog: FoodCatalog | None = CATALOG

    def load(self) -> FoodCatalog:
        if self.catalog is None:
            raise DataFileNotFoundError("Food catalog file not found.")
        return self.catalog


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def ui(output: io.StringIO) -> Ui:
    return Ui(input_stream=io.StringIO(""), output_stream=output)


@pytest.fixture
def food_list_repository() -> InMemoryFoodListRepository:
    return InMemoryFoodListRepository()


@pytest.fixture
def person_repository() -> InMemoryPersonRepository:
    return InMemoryPersonRepository()


@pytest.fixture
def catalog_repository() -> InMemoryCatalogRepository:
    return InMemoryCatalogRepository()


@pytest.fixture
def manager(
    food_list_repository: InMemoryFoodListRepository,
    person_repository: InMemoryPersonRepository,
    catalog_repository: InMemoryCatalogRepository,
) -> SessionManager:
    return SessionManager(
        food_list_repository=food_list_repository,
        person_repository=person_repository,
        catalog_repository=catalog_repository,
        catalog=CATALOG,
    )


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(data_dir=tmp_path)


@pytest.fixture
def make_container(settings: Settings, output: io.StringIO):
    """Return a factory building a container that reads the given input."""

    def _make(typed: str) -> AppContainer:
        return build_container(
            settings, input_stream=io.StringIO(typed), output_stream=output
        )

    return _make
