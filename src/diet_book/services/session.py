"""Session state shared by every command of one run."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from diet_book.domain.catalog import FoodCatalog
from diet_book.domain.person import Person
from diet_book.errors import CorruptRecordError, DataFileNotFoundError
from diet_book.services.commands import Command
from diet_book.services.food_list import FoodList
from diet_book.services.parser import parse_command

if TYPE_CHECKING:
    from diet_book.ui import Ui

_logger = logging.getLogger(__name__)


class FoodListRepository(Protocol):
    """Persistence interface for the food log."""

    def load(self) -> FoodList:
        """Return the stored food list."""

    def save(self, food_list: FoodList) -> None:
        """Replace the stored food list."""


class PersonRepository(Protocol):
    """Persistence interface for the user profile."""

    def load(self) -> Person:
        """Return the stored profile."""

    def save(self, person: Person) -> None:
        """Replace the stored profile."""


class CatalogRepository(Protocol):
    """Read-only source of the food catalog."""

    def load(self) -> FoodCatalog:
        """Return the catalog."""


class LoadStatus(Enum):
    """Outcome of restoring saved data at startup."""

    FRESH_START = "fresh_start"
    RESTORED = "restored"


@dataclass
class SessionManager:
    """Owns the food list and profile for one run of the program."""

    food_list_repository: FoodListRepository
    person_repository: PersonRepository
    catalog_repository: CatalogRepository | None = None
    catalog: FoodCatalog = field(default_factory=FoodCatalog)
    food_list: FoodList = field(default_factory=FoodList)
    person: Person = field(default_factory=Person)
    is_exit: bool = False

    def manage(self, line: str) -> Command:
        """Turn a typed line into an executable command."""
        return parse_command(line)

    def load(self, ui: "Ui") -> LoadStatus:
        """Restore the profile and food list, starting empty where missing.

        The catalog is read last and never counts as restored user data.
        """
        restored = False

        ui.print_message("Loading personal information...")
        try:
            self.person = self.person_repository.load()
            restored = True
        except DataFileNotFoundError:
            _logger.info("No profile file yet, starting with a new profile")
            ui.print_error_message(
                "Person data file not found! Creating new personal data..."
            )
        except CorruptRecordError as exc:
            _logger.warning("Ignoring unreadable profile: %s", exc)
            ui.print_error_message(str(exc))

        ui.print_message("Loading personal food data...")
        try:
            self.food_list = self.food_list_repository.load()
            restored = True
        except DataFileNotFoundError:
            _logger.info("No food list file yet, starting with an empty list")
            ui.print_error_message("FoodList data file not found! Creating new food list...")
        except CorruptRecordError as exc:
            _logger.warning("Ignoring unreadable food list: %s", exc)
            ui.print_error_message(str(exc))

        self._load_catalog(ui)
        return LoadStatus.RESTORED if restored else LoadStatus.FRESH_START

    def _load_catalog(self, ui: "Ui") -> None:
        if self.catalog_repository is None:
            return
        try:
            self.catalog = self.catalog_repository.load()
        except (DataFileNotFoundError, CorruptRecordError) as exc:
            _logger.warning("Food catalog unavailable: %s", exc)
            ui.print_error_message(
                f"Food catalog unavailable, add foods with their macros. {exc}"
            )

    def save(self) -> None:
        """Write the profile and food list to their files."""
        self.person_repository.save(self.person)
        self.food_list_repository.save(self.food_list)
