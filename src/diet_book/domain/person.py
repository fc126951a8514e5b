"""Domain models for the user's profile."""

from dataclasses import dataclass
from enum import Enum


class Gender(Enum):
    """Gender as stored in the profile file."""

    MALE = "Male"
    FEMALE = "Female"
    OTHERS = "Others"

    @classmethod
    def from_label(cls, label: str) -> "Gender":
        """Map a stored or typed label, treating anything unknown as OTHERS."""
        cleaned = label.strip().lower()
        for gender in cls:
            if gender.value.lower() == cleaned:
                return gender
        return cls.OTHERS


class FitnessLevel(Enum):
    """Activity level, stored as the integers 1 to 5."""

    NONE = 1
    LOW = 2
    MEDIUM = 3
    HIGH = 4
    EXTREME = 5

    @property
    def description(self) -> str:
        return _FITNESS_DESCRIPTIONS[self]


_FITNESS_DESCRIPTIONS = {
    FitnessLevel.NONE: "little or no exercise",
    FitnessLevel.LOW: "light exercise 1-3 days a week",
    FitnessLevel.MEDIUM: "moderate exercise 3-5 days a week",
    FitnessLevel.HIGH: "hard exercise 6-7 days a week",
    FitnessLevel.EXTREME: "very hard exercise or a physical job",
}


@dataclass(frozen=True)
class Person:
    """The user's personal attributes."""

    name: str = ""
    gender: Gender = Gender.OTHERS
    age: int = 0
    height: int = 0
    original_weight: int = 0
    current_weight: int = 0
    target_weight: int = 0
    fitness_level: FitnessLevel = FitnessLevel.NONE

    @property
    def is_set_up(self) -> bool:
        """Return True once the user has given a name."""
        return bool(self.name)

    def __str__(self) -> str:
        return "\n".join(
            [
                f"  Name: {self.name or '-'}",
                f"  Gender: {self.gender.value}",
                f"  Age: {self.age}",
                f"  Height: {self.height} cm",
                f"  Original weight: {self.original_weight} kg",
                f"  Current weight: {self.current_weight} kg",
                f"  Target weight: {self.target_weight} kg",
                f"  Fitness level: {self.fitness_level.name.lower()}"
                f" ({self.fitness_level.description})",
            ]
        )
