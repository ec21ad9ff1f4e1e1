"""Page geometry: points, ruled segments and positioned text."""

from pydantic import BaseModel, ConfigDict


class Point(BaseModel):
    """A position in PDF user space (y grows upwards)."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int


class Line(BaseModel):
    """A straight segment drawn by an ``m``/``l`` operator pair."""

    model_config = ConfigDict(frozen=True)

    start: Point
    end: Point

    @property
    def dx(self) -> int:
        return self.end.x - self.start.x

    @property
    def dy(self) -> int:
        return self.end.y - self.start.y

    @property
    def is_horizontal(self) -> bool:
        return self.dy == 0

    @property
    def is_vertical(self) -> bool:
        return self.dx == 0

    def intersects_x_border(self, border: int) -> bool:
        """Whether a horizontal line spans the vertical border at ``border``.

        Both ends are inclusive. Only left-to-right segments match, which is
        how the planning tool draws its rules.
        """
        if not self.is_horizontal:
            return False
        return self.start.x <= border <= self.end.x


class Text(BaseModel):
    """A glyph run placed by a ``Td``/``Tj`` operator pair."""

    model_config = ConfigDict(frozen=True)

    text: str
    position: Point

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def between_x(self, limit_start: int, limit_end: int) -> bool:
        """Strict containment of the x position; only works left to right."""
        return limit_start < self.position.x < limit_end

    def intersects_x_border(self, border: int) -> bool:
        # Compares y against an x border; no layout produced by the planning
        # tool makes this match, lines do the attaching.
        return self.position.y == border


PageObject = Line | Text


def y_coordinates(obj: PageObject) -> tuple[int, ...]:
    """All y values of an object: the baseline of a text, both ends of a line."""
    if isinstance(obj, Text):
        return (obj.position.y,)
    return (obj.start.y, obj.end.y)


def between_y(obj: PageObject, limit_top: int, limit_bottom: int) -> bool:
    """Whether every y coordinate of ``obj`` lies strictly inside the band."""
    return all(limit_bottom < y < limit_top for y in y_coordinates(obj))
