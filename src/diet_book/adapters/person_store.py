"""Text file persistence for the user profile."""

import logging
from contextlib import closing
from dataclasses import dataclass
from pathlib import Path

from diet_book.adapters.text_records import read_records, write_records
from diet_book.domain.person import FitnessLevel, Gender, Person
from diet_book.errors import CorruptRecordError, DataFileNotFoundError

_FIELD_COUNT = 8

_logger = logging.getLogger(__name__)


@dataclass
class TextPersonStore:
    """Reads and writes the profile as a single delimited line.

    Field order: name, gender, age, height, original weight, current weight,
    target weight, fitness level (1 to 5).
    """

    path: Path

    def load(self) -> Person:
        """Read the first profile record in the file."""
        if not self.path.exists():
            raise DataFileNotFoundError(f"Person data file {self.path} not found.")
        with closing(read_records(self.path)) as records:
            first = next(records, None)
        if first is None:
            raise CorruptRecordError(self.path, 1, "no profile record found")
        line_number, row = first
        person = _parse_row(row, self.path, line_number)
        _logger.info("Loaded profile for %s from %s", person.name, self.path)
        return person

    def save(self, person: Person) -> None:
        """Overwrite the file with the profile."""
        write_records(
            self.path,
            [
                [
                    person.name,
                    person.gender.value,
                    person.age,
                    person.height,
                    person.original_weight,
                    person.current_weight,
                    person.target_weight,
                    person.fitness_level.value,
                ]
            ],
        )
        _logger.info("Saved profile to %s", self.path)


def _parse_row(row: list[str], path: Path, line_number: int) -> Person:
    if len(row) != _FIELD_COUNT:
        raise CorruptRecordError(
            path, line_number, f"expected {_FIELD_COUNT} fields, found {len(row)}"
        )
    name, gender, *numbers, fitness_level = row
    try:
        age, height, original_weight, current_weight, target_weight = (
            int(value) for value in numbers
        )
        level = FitnessLevel(int(fitness_level))
    except ValueError as exc:
        raise CorruptRecordError(path, line_number, str(exc)) from exc
    return Person(
        name=name,
        gender=Gender.from_label(gender),
        age=age,
        height=height,
        original_weight=original_weight,
        current_weight=current_weight,
        target_weight=target_weight,
        fitness_level=level,
    )
