"""Executable commands produced by the parser."""

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import TYPE_CHECKING, Protocol

from diet_book.command_models import AddArguments, InfoArguments
from diet_book.diet_commands import help_text
from diet_book.domain.food import DatedFoodEntry, Food, FoodEntry
from diet_book.domain.person import FitnessLevel
from diet_book.errors import InvalidCommandError
from diet_book.services.food_list_manager import (
    filter_range,
    filter_since,
    render_numbered_dated,
    select_dated,
    sort_by_date,
)
from diet_book.services.stats import daily_totals, format_totals, total_intake

if TYPE_CHECKING:
    from diet_book.services.session import SessionManager
    from diet_book.ui import Ui

_logger = logging.getLogger(__name__)


class Command(Protocol):
    """An action produced from one line of input."""

    def execute(self, manager: "SessionManager", ui: "Ui") -> None:
        """Run the action against the session and report through the ui."""


@dataclass(frozen=True)
class HelpCommand(Command):
    def execute(self, manager: "SessionManager", ui: "Ui") -> None:
        ui.print_message("Here are the commands you can use:\n" + help_text())


@dataclass(frozen=True)
class AddCommand(Command):
    """Log a new dated entry, timestamped now unless a time was given.

    Without any typed macro the food is taken from the catalog by name.
    """

    arguments: AddArguments

    def execute(self, manager: "SessionManager", ui: "Ui") -> None:
        food = self._resolve_food(manager)
        entry = DatedFoodEntry(
            food,
            self.arguments.portion_size,
            date_time=self.arguments.date_time or datetime.now(),
        )
        manager.food_list.add(entry)
        _logger.debug("Added entry %s", entry)
        ui.print_message(f"Added to the list:\n  {entry.to_dated_string()}")

    def _resolve_food(self, manager: "SessionManager") -> Food:
        arguments = self.arguments
        if arguments.has_macros():
            return Food(
                name=arguments.name,
                calorie=arguments.calorie or 0,
                carbohydrate=arguments.carbohydrate or 0,
                protein=arguments.protein or 0,
                fat=arguments.fat or 0,
            )
        food = manager.catalog.find(arguments.name, arguments.store)
        if food is None:
            where = f"store '{arguments.store}'" if arguments.store else "the catalog"
            raise InvalidCommandError(
                f"'{arguments.name}' is not in {where}."
                " Give its macros with k/ c/ p/ f/ to log it."
            )
        return food


@dataclass(frozen=True)
class ListCommand(Command):
    def execute(self, manager: "SessionManager", ui: "Ui") -> None:
        if not manager.food_list.size():
            ui.print_message("The food list is empty.")
            return
        ui.print_food_list(str(manager.food_list))


@dataclass(frozen=True)
class HistoryCommand(Command):
    """Show dated entries in time order within an optional window."""

    start: datetime | None = None
    end: datetime | None = None

    def execute(self, manager: "SessionManager", ui: "Ui") -> None:
        entries = sort_by_date(
            _in_window(manager.food_list.as_sequence(), self.start, self.end)
        )
        if not entries:
            ui.print_message("No dated entries found.")
            return
        ui.print_food_list(render_numbered_dated(entries))


@dataclass(frozen=True)
class CatalogCommand(Command):
    """Show the catalog, or the foods of one store."""

    store: str | None = None

    def execute(self, manager: "SessionManager", ui: "Ui") -> None:
        catalog = manager.catalog
        if self.store is not None and catalog.store_named(self.store) is None:
            raise InvalidCommandError(f"'{self.store}' is not a store in the catalog.")
        if catalog.is_empty():
            ui.print_message("The food catalog is empty.")
            return
        ui.print_message(
            "Here are the foods you can add by name:\n" + catalog.render(self.store)
        )


@dataclass(frozen=True)
class DeleteCommand(Command):
    index: int

    def execute(self, manager: "SessionManager", ui: "Ui") -> None:
        removed = manager.food_list.remove_at(self.index)
        ui.print_message(f"Removed from the list:\n  {removed}")


@dataclass(frozen=True)
class ClearCommand(Command):
    def execute(self, manager: "SessionManager", ui: "Ui") -> None:
        manager.food_list.clear()
        ui.print_message("The food list has been cleared.")


@dataclass(frozen=True)
class CalculateCommand(Command):
    """Report total intake, split per day when there are dated entries."""

    start: datetime | None = None
    end: datetime | None = None

    def execute(self, manager: "SessionManager", ui: "Ui") -> None:
        entries: tuple[FoodEntry, ...] | list[DatedFoodEntry]
        if self.start is None and self.end is None:
            entries = manager.food_list.as_sequence()
        else:
            entries = _in_window(manager.food_list.as_sequence(), self.start, self.end)
        if not entries:
            ui.print_message("There is nothing to calculate.")
            return
        lines = [f"Total intake: {format_totals(total_intake(entries))}"]
        per_day = daily_totals(select_dated(entries))
        if len(per_day) > 1:
            lines.append("Per day:")
            lines.extend(
                f"  {daily.day.isoformat()}: {format_totals(daily.totals)}"
                for daily in per_day
            )
        ui.print_message("\n".join(lines))


@dataclass(frozen=True)
class InfoCommand(Command):
    """Apply the given profile fields, keeping the others."""

    updates: InfoArguments

    def execute(self, manager: "SessionManager", ui: "Ui") -> None:
        changes = self.updates.model_dump(exclude_none=True)
        if not changes:
            ui.print_message(f"Nothing to update. Your profile:\n{manager.person}")
            return
        if "fitness_level" in changes:
            changes["fitness_level"] = FitnessLevel(changes["fitness_level"])
        manager.person = replace(manager.person, **changes)
        ui.print_message("Your profile has been updated:\n" + str(manager.person))


@dataclass(frozen=True)
class UserInfoCommand(Command):
    def execute(self, manager: "SessionManager", ui: "Ui") -> None:
        ui.print_message("Your profile:\n" + str(manager.person))


@dataclass(frozen=True)
class SaveCommand(Command):
    def execute(self, manager: "SessionManager", ui: "Ui") -> None:
        manager.save()
        ui.print_message("Your profile and food list have been saved.")


@dataclass(frozen=True)
class ExitCommand(Command):
    def execute(self, manager: "SessionManager", ui: "Ui") -> None:
        manager.save()
        manager.is_exit = True
        ui.print_goodbye_message()


def _in_window(
    entries: tuple[FoodEntry, ...], start: datetime | None, end: datetime | None
) -> list[DatedFoodEntry]:
    dated = select_dated(entries)
    if start is not None and end is not None:
        return filter_range(dated, start, end)
    if start is not None:
        return filter_since(dated, start)
    if end is not None:
        return [entry for entry in dated if entry.date_time <= end]
    return dated
