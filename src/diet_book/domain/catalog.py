"""Read-only catalog of known foods, grouped by the store that sells them."""

from dataclasses import dataclass

from diet_book.domain.food import Food


@dataclass(frozen=True)
class Store:
    """A named store and the foods it sells, in catalog order."""

    name: str
    foods: tuple[Food, ...] = ()


@dataclass(frozen=True)
class FoodCatalog:
    """Foods that can be logged by name without typing their macros.

    Names match case-insensitively. When several stores sell a food of the
    same name and no store is given, the first store in catalog order wins.
    """

    stores: tuple[Store, ...] = ()

    def is_empty(self) -> bool:
        return not any(store.foods for store in self.stores)

    def store_named(self, name: str) -> Store | None:
        wanted = name.strip().casefold()
        for store in self.stores:
            if store.name.casefold() == wanted:
                return store
        return None

    def find(self, name: str, store: str | None = None) -> Food | None:
        """Return the food with the given name, optionally from one store."""
        wanted = name.strip().casefold()
        if store is None:
            candidates = self.stores
        else:
            selected = self.store_named(store)
            candidates = (selected,) if selected is not None else ()
        for candidate in candidates:
            for food in candidate.foods:
                if food.name.casefold() == wanted:
                    return food
        return None

    def render(self, store: str | None = None) -> str:
        """Render foods under their store headings, optionally for one store."""
        if store is None:
            shown = self.stores
        else:
            selected = self.store_named(store)
            shown = (selected,) if selected is not None else ()
        lines: list[str] = []
        for entry in shown:
            lines.append(f"  {entry.name}:")
            lines.extend(f"    {food.name} | {food}" for food in entry.foods)
        return "\n".join(lines)
