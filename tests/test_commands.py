"""Tests for command execution."""

from datetime import datetime

import pytest

from diet_book.domain.catalog import FoodCatalog
from diet_book.domain.food import Food
from diet_book.domain.person import FitnessLevel, Gender
from diet_book.errors import IndexOutOfRangeError, InvalidCommandError
from diet_book.services.food_list import FoodList
from tests.conftest import APPLE, APPLE_JUICE, RICE, dated, plain


def test_add_logs_a_dated_entry(manager, ui, output) -> None:
    manager.manage("add x/2 n/Rice k/200 c/45 p/4 f/1 t/2020-10-05T12:30").execute(
        manager, ui
    )

    assert manager.food_list.as_sequence() == (dated(RICE, 2, "2020-10-05T12:30"),)
    assert "Added to the list" in output.getvalue()


def test_add_without_time_uses_now(manager, ui) -> None:
    before = datetime.now().replace(second=0, microsecond=0)

    manager.manage("add n/Kopi").execute(manager, ui)

    assert manager.food_list.get(1).date_time >= before


def test_add_by_name_uses_catalog_food(manager, ui) -> None:
    manager.manage("add x/3 n/apple t/2020-10-05T08:00").execute(manager, ui)

    entry = manager.food_list.get(1)
    assert entry == dated(APPLE, 3, "2020-10-05T08:00")
    assert entry.food is manager.catalog.find("Apple")


def test_add_by_name_from_chosen_store(manager, ui) -> None:
    manager.manage("add n/Apple s/drinks stall").execute(manager, ui)

    assert manager.food_list.get(1).food == APPLE_JUICE


@pytest.mark.parametrize(
    ("line", "message"),
    [
        ("add n/Durian", "'Durian' is not in the catalog"),
        ("add n/Kopi s/Fruit Stall", "'Kopi' is not in store 'Fruit Stall'"),
    ],
)
def test_add_by_name_not_in_catalog(manager, ui, line: str, message: str) -> None:
    with pytest.raises(InvalidCommandError) as excinfo:
        manager.manage(line).execute(manager, ui)

    assert message in str(excinfo.value)
    assert manager.food_list.size() == 0


def test_add_with_partial_macros_skips_catalog(manager, ui) -> None:
    manager.manage("add n/Apple k/60").execute(manager, ui)

    assert manager.food_list.get(1).food == Food("Apple", calorie=60)


def test_catalog_lists_stores_and_foods(manager, ui, output) -> None:
    manager.manage("catalog").execute(manager, ui)

    text = output.getvalue()
    assert "  Fruit Stall:" in text
    assert "    Kopi | calorie: 140 kcal" in text
    assert text.index("Fruit Stall") < text.index("Drinks Stall")


def test_catalog_filtered_by_store(manager, ui, output) -> None:
    manager.manage("catalog s/Drinks Stall").execute(manager, ui)

    text = output.getvalue()
    assert "Kopi" in text
    assert "Banana" not in text


def test_catalog_unknown_store(manager, ui) -> None:
    with pytest.raises(InvalidCommandError):
        manager.manage("catalog s/Bakery").execute(manager, ui)


def test_catalog_empty(manager, ui, output) -> None:
    manager.catalog = FoodCatalog()

    manager.manage("catalog").execute(manager, ui)

    assert "The food catalog is empty." in output.getvalue()


def test_list_shows_numbered_entries(manager, ui, output) -> None:
    manager.food_list = FoodList([plain(APPLE), plain(RICE, 2)])

    manager.manage("list").execute(manager, ui)

    text = output.getvalue()
    assert "  1. Apple x1" in text
    assert "  2. Rice x2" in text


def test_list_empty(manager, ui, output) -> None:
    manager.manage("list").execute(manager, ui)

    assert "empty" in output.getvalue()


def test_delete_out_of_range_leaves_list(manager, ui) -> None:
    manager.food_list = FoodList([plain(APPLE), plain(RICE), plain(APPLE)])

    with pytest.raises(IndexOutOfRangeError):
        manager.manage("delete 5").execute(manager, ui)

    assert manager.food_list.size() == 3


def test_delete_removes_entry(manager, ui, output) -> None:
    manager.food_list = FoodList([plain(APPLE), plain(RICE)])

    manager.manage("delete 1").execute(manager, ui)

    assert manager.food_list.as_sequence() == (plain(RICE),)
    assert "Removed" in output.getvalue()


def test_history_sorts_and_skips_undated(manager, ui, output) -> None:
    manager.food_list = FoodList(
        [
            dated(RICE, 1, "2020-10-05T12:30"),
            plain(APPLE, 4),
            dated(APPLE, 1, "2020-10-05T08:00"),
        ]
    )

    manager.manage("history").execute(manager, ui)

    lines = [line for line in output.getvalue().splitlines() if line.startswith("  ")]
    assert lines[0].startswith("  1. Apple x1")
    assert lines[0].endswith("2020-10-05 08:00")
    assert lines[1].startswith("  2. Rice x1")
    assert len(lines) == 2


def test_calculate_totals_every_entry(manager, ui, output) -> None:
    manager.food_list = FoodList(
        [dated(APPLE, 1, "2020-10-05T08:00"), dated(RICE, 2, "2020-10-06T12:30")]
    )

    manager.manage("calculate").execute(manager, ui)

    text = output.getvalue()
    assert "Total intake: calorie: 450 kcal" in text
    assert "2020-10-05: calorie: 50 kcal" in text
    assert "2020-10-06: calorie: 400 kcal" in text


def test_calculate_within_window(manager, ui, output) -> None:
    manager.food_list = FoodList(
        [
            dated(APPLE, 1, "2020-10-05T08:00"),
            dated(RICE, 2, "2020-10-06T12:30"),
            plain(RICE, 5),
        ]
    )

    manager.manage("calculate s/2020-10-06T00:00 e/2020-10-06T23:59").execute(
        manager, ui
    )

    assert "Total intake: calorie: 400 kcal" in output.getvalue()


def test_calculate_since(manager, ui, output) -> None:
    manager.food_list = FoodList(
        [dated(APPLE, 1, "2020-10-05T08:00"), dated(RICE, 1, "2020-10-06T12:30")]
    )

    manager.manage("calculate s/2020-10-05T08:00").execute(manager, ui)

    assert "Total intake: calorie: 250 kcal" in output.getvalue()


def test_info_updates_only_given_fields(manager, ui) -> None:
    manager.manage("info n/Sam g/Male a/30 l/4").execute(manager, ui)
    manager.manage("info c/70").execute(manager, ui)

    person = manager.person
    assert person.name == "Sam"
    assert person.gender is Gender.MALE
    assert person.age == 30
    assert person.current_weight == 70
    assert person.fitness_level is FitnessLevel.HIGH


def test_userinfo_shows_profile(manager, ui, output) -> None:
    manager.manage("info n/Sam").execute(manager, ui)

    manager.manage("userinfo").execute(manager, ui)

    assert "Name: Sam" in output.getvalue()


def test_clear_then_save(manager, ui, food_list_repository, person_repository) -> None:
    manager.food_list = FoodList([plain(APPLE)])

    manager.manage("clear").execute(manager, ui)
    manager.manage("save").execute(manager, ui)

    assert food_list_repository.stored == []
    assert person_repository.saves


def test_exit_saves_and_stops(manager, ui, food_list_repository) -> None:
    manager.food_list = FoodList([plain(APPLE)])

    manager.manage("exit").execute(manager, ui)

    assert manager.is_exit
    assert food_list_repository.stored == [plain(APPLE)]


def test_help_lists_every_command(manager, ui, output) -> None:
    manager.manage("help").execute(manager, ui)

    assert "calculate [s/START] [e/END]" in output.getvalue()
