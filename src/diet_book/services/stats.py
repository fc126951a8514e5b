"""Nutrition totals computed from logged entries."""

from collections.abc import Sequence
from datetime import date

from diet_book.domain.food import DatedFoodEntry, Food, FoodEntry
from diet_book.domain.stats import DailyTotals, MacroTotals
from diet_book.services.food_list_manager import sort_by_date, to_portioned_foods


def sum_foods(foods: Sequence[Food]) -> MacroTotals:
    """Add up the macros of the given foods."""
    total = MacroTotals()
    for food in foods:
        total = MacroTotals(
            calorie=total.calorie + food.calorie,
            carbohydrate=total.carbohydrate + food.carbohydrate,
            protein=total.protein + food.protein,
            fat=total.fat + food.fat,
        )
    return total


def total_intake(entries: Sequence[FoodEntry]) -> MacroTotals:
    """Return the portion-scaled macro totals of the entries."""
    return sum_foods(to_portioned_foods(entries))


def daily_totals(entries: Sequence[DatedFoodEntry]) -> list[DailyTotals]:
    """Return totals per calendar day, oldest day first."""
    by_day: dict[date, list[DatedFoodEntry]] = {}
    for entry in sort_by_date(entries):
        by_day.setdefault(entry.date_time.date(), []).append(entry)
    return [
        DailyTotals(day=day, totals=total_intake(day_entries))
        for day, day_entries in by_day.items()
    ]


def format_totals(totals: MacroTotals) -> str:
    return (
        f"calorie: {totals.calorie} kcal | carbohydrate: {totals.carbohydrate} g"
        f" | protein: {totals.protein} g | fat: {totals.fat} g"
    )
