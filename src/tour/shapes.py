"""Shape classes: initializers, overrides, computed and observed properties."""

from __future__ import annotations


class Shape:
    def __init__(self) -> None:
        self.number_of_sides = 0

    def simple_description(self) -> str:
        return f"A shape with {self.number_of_sides} sides."


class NamedShape:
    """A shape with a name; a root class of its own, not a kind of :class:`Shape`."""

    def __init__(self, name: str) -> None:
        self.number_of_sides = 0
        self.name = name

    def simple_description(self) -> str:
        return f"A shape with {self.number_of_sides} sides."


class Square(NamedShape):
    def __init__(self, side_length: float, name: str) -> None:
        # Subclass state first, then the base initializer, then base state.
        self.side_length = side_length
        super().__init__(name)
        self.number_of_sides = 4

    def area(self) -> float:
        return self.side_length * self.side_length

    def simple_description(self) -> str:
        return f"A square with sides of length {self.side_length}."


class EquilateralTriangle(NamedShape):
    def __init__(self, side_length: float, name: str) -> None:
        self.side_length = side_length
        super().__init__(name)
        self.number_of_sides = 3

    @property
    def perimeter(self) -> float:
        return 3.0 * self.side_length

    @perimeter.setter
    def perimeter(self, value: float) -> None:
        self.side_length = value / 3.0

    def simple_description(self) -> str:
        return f"An equilateral triangle with sides of length {self.side_length}."


class TriangleAndSquare:
    """Keeps a triangle and a square at the same side length.

    Assigning either shape resizes the other; the initializer sets both
    without triggering that.
    """

    def __init__(self, size: float, name: str) -> None:
        self._square = Square(size, name)
        self._triangle = EquilateralTriangle(size, name)

    @property
    def square(self) -> Square:
        return self._square

    @square.setter
    def square(self, new_value: Square) -> None:
        self._triangle.side_length = new_value.side_length
        self._square = new_value

    @property
    def triangle(self) -> EquilateralTriangle:
        return self._triangle

    @triangle.setter
    def triangle(self, new_value: EquilateralTriangle) -> None:
        self._square.side_length = new_value.side_length
        self._triangle = new_value
