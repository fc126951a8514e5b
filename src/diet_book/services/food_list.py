"""The session's mutable list of food entries."""

from collections.abc import Iterable, Iterator

from diet_book.domain.food import FoodEntry
from diet_book.errors import IndexOutOfRangeError
from diet_book.services.food_list_manager import delete_at, render_numbered


class FoodList:
    """Ordered food entries, addressed by 1-based index."""

    def __init__(self, entries: Iterable[FoodEntry] = ()) -> None:
        self._entries: list[FoodEntry] = list(entries)

    def add(self, entry: FoodEntry) -> None:
        """Append an entry."""
        self._entries.append(entry)

    def remove_at(self, index: int) -> FoodEntry:
        """Remove and return the entry at a 1-based index."""
        return delete_at(self._entries, index)

    def get(self, index: int) -> FoodEntry:
        """Return the entry at a 1-based index."""
        if index < 1 or index > len(self._entries):
            raise IndexOutOfRangeError(index, len(self._entries))
        return self._entries[index - 1]

    def clear(self) -> None:
        self._entries.clear()

    def size(self) -> int:
        return len(self._entries)

    def as_sequence(self) -> tuple[FoodEntry, ...]:
        """Return a read-only snapshot of the entries."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[FoodEntry]:
        return iter(self.as_sequence())

    def __str__(self) -> str:
        return render_numbered(self._entries)
