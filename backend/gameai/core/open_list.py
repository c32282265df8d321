"""Queue and stack wrappers sharing one open-list interface."""
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Dict, Type


class OpenList(ABC):
    """Frontier container used by the iterative searches."""

    def __init__(self):
        self._items: deque = deque()

    def clear(self) -> None:
        self._items.clear()

    def push(self, item: Any) -> None:
        self._items.append(item)

    @abstractmethod
    def pop(self) -> Any:
        """Remove and return the next item to expand."""

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class Queue(OpenList):
    """First in, first out."""

    def pop(self) -> Any:
        return self._items.popleft()


class Stack(OpenList):
    """Last in, first out."""

    def pop(self) -> Any:
        return self._items.pop()


OPEN_LISTS: Dict[str, Type[OpenList]] = {
    "queue": Queue,
    "stack": Stack,
}


def get_open_list(name: str) -> OpenList:
    """Create an open list by name ("queue" or "stack")."""
    try:
        return OPEN_LISTS[name]()
    except KeyError:
        raise ValueError(f"Unknown open list '{name}'. Must be one of: {list(OPEN_LISTS)}")
