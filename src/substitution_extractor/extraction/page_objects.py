"""Deduplicated, insertion-ordered collection of page objects."""

from collections.abc import Iterable, Iterator

from .geometry import Line, PageObject, Text


class PageObjects:
    """Set of lines and texts found on one page (or one table region).

    Identical objects collapse. Iteration follows first insertion, which keeps
    results reproducible between interpreter runs.
    """

    def __init__(self, objects: Iterable[PageObject] = ()):
        self._objects: dict[PageObject, None] = {}
        for obj in objects:
            self.add(obj)

    def add(self, obj: PageObject) -> None:
        self._objects.setdefault(obj, None)

    def __iter__(self) -> Iterator[PageObject]:
        return iter(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, obj: object) -> bool:
        return obj in self._objects

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PageObjects):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"PageObjects(texts={len(self.texts())}, lines={len(self.lines())})"

    def texts(self) -> list[Text]:
        return [o for o in self._objects if isinstance(o, Text)]

    def lines(self) -> list[Line]:
        return [o for o in self._objects if isinstance(o, Line)]

    def horizontal_lines(self) -> list[Line]:
        return [line for line in self.lines() if line.is_horizontal]
