"""Error hierarchy for DietBook."""


class DietBookError(Exception):
    """Base class for errors that are reported back to the user."""


class InvalidEntryError(DietBookError):
    """Raised when a food or food entry violates its invariants."""


class IndexOutOfRangeError(DietBookError, IndexError):
    """Raised when a 1-based list index is outside the list."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Index {index} is out of range. The list has {size} entries.")
        self.index = index
        self.size = size


class CorruptRecordError(DietBookError):
    """Raised when a persisted line cannot be parsed."""

    def __init__(self, path: object, line_number: int, reason: str) -> None:
        super().__init__(f"Corrupt record in {path} at line {line_number}: {reason}")
        self.path = path
        self.line_number = line_number
        self.reason = reason


class DataFileNotFoundError(DietBookError, FileNotFoundError):
    """Raised when a data file has not been created yet."""


class InvalidCommandError(DietBookError):
    """Raised when a typed command cannot be understood."""
