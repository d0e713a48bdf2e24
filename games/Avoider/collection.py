"""
Ordered, mutable collection of entities.
"""

from typing import Iterator, List, Optional

from games.Avoider.entities import Entity


class EntityCollection:
    """An ordered list of entities with lookup by name.

    Removal order is not guaranteed to be preserved for the remaining items.

    Examples:
        >>> npcs = EntityCollection()
        >>> npcs.add(orb)
        >>> len(npcs)
        1
        >>> npcs.get_by_name('orb') is orb
        True
    """

    def __init__(self, items: Optional[List[Entity]] = None):
        self._items: List[Entity] = list(items or [])

    def add(self, entity: Entity) -> None:
        self._items.append(entity)

    def remove_at(self, index: int) -> Entity:
        """Remove and return the entity at index.

        Raises:
            IndexError: If index is out of range
        """
        return self._items.pop(index)

    def remove(self, entity: Entity) -> bool:
        """Remove an entity by identity. Returns False if it wasn't present."""
        for i, item in enumerate(self._items):
            if item is entity:
                del self._items[i]
                return True
        return False

    def clear(self) -> None:
        self._items.clear()

    def get_by_name(self, name: str) -> Optional[Entity]:
        """Return the first entity with the given name, or None."""
        for item in self._items:
            if item.name == name:
                return item
        return None

    def remove_dead(self) -> int:
        """Drop every entity with alive == False. Returns how many were removed."""
        before = len(self._items)
        self._items = [item for item in self._items if item.alive]
        return before - len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Entity]:
        # Iterate over a copy so callers may remove while looping
        return iter(list(self._items))

    def __getitem__(self, index: int) -> Entity:
        return self._items[index]

    def __contains__(self, entity: Entity) -> bool:
        return any(item is entity for item in self._items)

    def __repr__(self) -> str:
        return f"EntityCollection({[item.name for item in self._items]})"
