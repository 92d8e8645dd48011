"""Classes, initializers, inheritance, properties and optional chaining."""

from __future__ import annotations

from tour.optional import OptionalValue, some
from tour.shapes import EquilateralTriangle, Shape, Square, TriangleAndSquare


def demo_1_instances() -> None:
    """Attributes are set on the instance after construction."""
    shape = Shape()
    shape.number_of_sides = 7
    print("1. shape:", shape.simple_description())


def demo_2_subclasses() -> None:
    """Overrides replace the base description; ``super()`` runs the base init."""
    test = Square(5.2, "my test square")
    print("2. square:", round(test.area(), 2), test.simple_description(), sep=" | ")


def demo_3_properties() -> None:
    """A property setter derives the stored side length from the perimeter."""
    triangle = EquilateralTriangle(3.1, "a triangle")
    before = round(triangle.perimeter, 2)
    triangle.perimeter = 9.9
    print("3. perimeter:", before, round(triangle.side_length, 2), sep=" | ")


def demo_4_observers() -> None:
    """Replacing one shape resizes its partner."""
    pair = TriangleAndSquare(10, "another test shape")
    square_side = pair.square.side_length
    triangle_side = pair.triangle.side_length
    pair.square = Square(50, "larger square")
    print(
        "4. observers:",
        square_side,
        triangle_side,
        pair.triangle.side_length,
        sep=" | ",
    )


def demo_5_optional_chaining() -> None:
    """Reach into an optional object; absence short-circuits the whole chain."""
    optional_square: OptionalValue[Square] = some(Square(2.5, "optional square"))
    side_length = optional_square.chain(lambda square: square.side_length)
    print("5. chaining:", side_length)


def run_all() -> None:
    demo_1_instances()
    demo_2_subclasses()
    demo_3_properties()
    demo_4_observers()
    demo_5_optional_chaining()


if __name__ == "__main__":
    run_all()
