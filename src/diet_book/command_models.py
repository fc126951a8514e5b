"""Pydantic models for typed command arguments."""

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from diet_book.domain.food import parse_timestamp
from diet_book.domain.person import Gender
from diet_book.errors import InvalidEntryError


def _parse_optional_timestamp(value: object) -> object:
    if isinstance(value, str):
        try:
            return parse_timestamp(value)
        except InvalidEntryError as exc:
            raise ValueError(str(exc)) from exc
    return value


class CommandArguments(BaseModel):
    """Base for argument models; PREFIXES maps a typed prefix to a field."""

    PREFIXES: ClassVar[dict[str, str]] = {}

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")


class AddArguments(CommandArguments):
    """Arguments of the add command."""

    PREFIXES: ClassVar[dict[str, str]] = {
        "x": "portion_size",
        "n": "name",
        "k": "calorie",
        "c": "carbohydrate",
        "p": "protein",
        "f": "fat",
        "t": "date_time",
        "s": "store",
    }

    name: str = Field(min_length=1)
    portion_size: int = Field(default=1, ge=1)
    calorie: int | None = Field(default=None, ge=0)
    carbohydrate: int | None = Field(default=None, ge=0)
    protein: int | None = Field(default=None, ge=0)
    fat: int | None = Field(default=None, ge=0)
    date_time: datetime | None = None
    store: str | None = Field(default=None, min_length=1)

    parse_date_time = field_validator("date_time", mode="before")(
        _parse_optional_timestamp
    )

    @model_validator(mode="after")
    def check_source(self) -> "AddArguments":
        if self.store is not None and self.has_macros():
            raise ValueError("Give either s/STORE or the macros, not both.")
        return self

    def has_macros(self) -> bool:
        """True when any macro was typed; otherwise the food comes from the catalog."""
        return any(
            value is not None
            for value in (self.calorie, self.carbohydrate, self.protein, self.fat)
        )


class DateRangeArguments(CommandArguments):
    """Optional start and end of a time window."""

    PREFIXES: ClassVar[dict[str, str]] = {"s": "start", "e": "end"}

    start: datetime | None = None
    end: datetime | None = None

    parse_bounds = field_validator("start", "end", mode="before")(
        _parse_optional_timestamp
    )

    @model_validator(mode="after")
    def check_order(self) -> "DateRangeArguments":
        if self.start is not None and self.end is not None and self.start >= self.end:
            raise ValueError("End time should be later than start time.")
        return self


class CatalogArguments(CommandArguments):
    """Optional store filter of the catalog command."""

    PREFIXES: ClassVar[dict[str, str]] = {"s": "store"}

    store: str | None = Field(default=None, min_length=1)


class DeleteArguments(CommandArguments):
    """Argument of the delete command."""

    index: int


class InfoArguments(CommandArguments):
    """Profile fields to update; missing fields keep their value."""

    PREFIXES: ClassVar[dict[str, str]] = {
        "n": "name",
        "g": "gender",
        "a": "age",
        "h": "height",
        "o": "original_weight",
        "c": "current_weight",
        "t": "target_weight",
        "l": "fitness_level",
    }

    name: str | None = Field(default=None, min_length=1)
    gender: Gender | None = None
    age: int | None = Field(default=None, ge=0)
    height: int | None = Field(default=None, ge=0)
    original_weight: int | None = Field(default=None, ge=0)
    current_weight: int | None = Field(default=None, ge=0)
    target_weight: int | None = Field(default=None, ge=0)
    fitness_level: int | None = Field(default=None, ge=1, le=5)

    @field_validator("gender", mode="before")
    @classmethod
    def parse_gender(cls, value: object) -> object:
        if isinstance(value, str):
            return Gender.from_label(value)
        return value
