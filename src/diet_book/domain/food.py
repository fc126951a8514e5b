"""Domain models for foods and logged food entries."""

from dataclasses import dataclass, field
from datetime import datetime

from diet_book.errors import InvalidEntryError

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M"
DISPLAY_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"
_ACCEPTED_TIMESTAMP_FORMATS = (TIMESTAMP_FORMAT, DISPLAY_TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class Food:
    """Nutritional record for a single portion of a food."""

    name: str
    calorie: int = 0
    carbohydrate: int = 0
    protein: int = 0
    fat: int = 0

    def __post_init__(self) -> None:
        for macro in ("calorie", "carbohydrate", "protein", "fat"):
            if getattr(self, macro) < 0:
                raise InvalidEntryError(f"{macro.capitalize()} cannot be negative.")

    def scaled(self, factor: int) -> "Food":
        """Return a copy with every macro multiplied by factor."""
        return Food(
            name=self.name,
            calorie=self.calorie * factor,
            carbohydrate=self.carbohydrate * factor,
            protein=self.protein * factor,
            fat=self.fat * factor,
        )

    def __str__(self) -> str:
        return (
            f"calorie: {self.calorie} kcal | carbohydrate: {self.carbohydrate} g"
            f" | protein: {self.protein} g | fat: {self.fat} g"
        )


def render_entry(food: Food, portion_size: int) -> str:
    """Render a food and its portion on one line, shared by both entry kinds."""
    return f"{food.name} x{portion_size} | {food}"


def _check_portion(portion_size: int) -> None:
    if isinstance(portion_size, bool) or not isinstance(portion_size, int):
        raise InvalidEntryError("Portion size must be a whole number.")
    if portion_size < 1:
        raise InvalidEntryError("Portion size must be at least 1.")


@dataclass(frozen=True)
class PlainFoodEntry:
    """A logged food without a timestamp."""

    food: Food
    portion_size: int = 1

    def __post_init__(self) -> None:
        _check_portion(self.portion_size)

    def __str__(self) -> str:
        return render_entry(self.food, self.portion_size)


@dataclass(frozen=True)
class DatedFoodEntry:
    """A logged food with the minute it was eaten.

    Entries order by ``date_time`` only, so two entries logged in the same
    minute compare as neither smaller nor larger and a stable sort keeps
    them in logging order. Equality stays by value.
    """

    food: Food
    portion_size: int = 1
    date_time: datetime | None = field(default=None, kw_only=True)

    def __post_init__(self) -> None:
        _check_portion(self.portion_size)
        if not isinstance(self.date_time, datetime):
            raise InvalidEntryError("A dated entry needs a date and time.")
        object.__setattr__(
            self, "date_time", self.date_time.replace(second=0, microsecond=0)
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DatedFoodEntry):
            return NotImplemented
        return self.date_time < other.date_time

    def __str__(self) -> str:
        return render_entry(self.food, self.portion_size)

    def to_dated_string(self) -> str:
        """Render the entry followed by its timestamp."""
        return f"{self} | {format_timestamp(self.date_time, display=True)}"


FoodEntry = PlainFoodEntry | DatedFoodEntry


def parse_timestamp(text: str) -> datetime:
    """Parse a minute-precision timestamp typed by the user or read from disk."""
    cleaned = text.strip()
    for fmt in _ACCEPTED_TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt)
        except ValueError:
            continue
    raise InvalidEntryError(
        f"'{cleaned}' is not a valid date and time. Use YYYY-MM-DDTHH:MM."
    )


def format_timestamp(value: datetime, *, display: bool = False) -> str:
    """Format a timestamp for storage, or for display when requested."""
    return value.strftime(DISPLAY_TIMESTAMP_FORMAT if display else TIMESTAMP_FORMAT)
