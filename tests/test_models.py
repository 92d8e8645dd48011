from __future__ import annotations

import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from dataclasses import FrozenInstanceError, replace

from tour.cards import Card, Failure, Rank, Result, Suit, describe_response
from tour.functions import (
    Statistics,
    calculate_statistics,
    greet,
    greet_on,
    has_any_matches,
    less_than_ten,
    make_increment,
    return_fifteen,
)
from tour.generics import any_common_elements, make_array
from tour.optional import none, some
from tour.shapes import EquilateralTriangle, NamedShape, Shape, Square, TriangleAndSquare


class ShapeTests(unittest.TestCase):
    def test_base_descriptions(self) -> None:
        shape = Shape()
        shape.number_of_sides = 7
        self.assertEqual(shape.simple_description(), "A shape with 7 sides.")
        self.assertEqual(NamedShape("blob").simple_description(), "A shape with 0 sides.")

    def test_named_shape_is_a_separate_root(self) -> None:
        blob = NamedShape("blob")
        self.assertNotIsInstance(blob, Shape)
        self.assertEqual(blob.number_of_sides, 0)
        self.assertIsInstance(Square(1, "s"), NamedShape)
        self.assertNotIsInstance(Square(1, "s"), Shape)

    def test_square(self) -> None:
        square = Square(5.2, "my test square")
        self.assertAlmostEqual(square.area(), 27.04)
        self.assertEqual(square.number_of_sides, 4)
        self.assertEqual(square.name, "my test square")
        self.assertEqual(
            square.simple_description(), "A square with sides of length 5.2."
        )

    def test_triangle_perimeter_property(self) -> None:
        triangle = EquilateralTriangle(3.1, "a triangle")
        self.assertAlmostEqual(triangle.perimeter, 9.3)
        triangle.perimeter = 9.9
        self.assertAlmostEqual(triangle.side_length, 3.3)
        self.assertEqual(triangle.number_of_sides, 3)

    def test_observed_pair_stays_in_sync(self) -> None:
        pair = TriangleAndSquare(10, "another test shape")
        self.assertEqual(pair.square.side_length, 10)
        self.assertEqual(pair.triangle.side_length, 10)
        pair.square = Square(50, "larger square")
        self.assertEqual(pair.triangle.side_length, 50)
        pair.triangle = EquilateralTriangle(7, "small")
        self.assertEqual(pair.square.side_length, 7)

    def test_optional_chaining(self) -> None:
        self.assertEqual(
            some(Square(2.5, "optional square")).chain(lambda s: s.side_length),
            some(2.5),
        )
        self.assertEqual(none().chain(lambda s: s.side_length), none())


class CardTests(unittest.TestCase):
    def test_rank_descriptions(self) -> None:
        self.assertEqual(Rank.ACE.value, 1)
        self.assertEqual(Rank.ACE.simple_description(), "ace")
        self.assertEqual(Rank.QUEEN.simple_description(), "queen")
        self.assertEqual(Rank.THREE.simple_description(), "3")

    def test_failable_rank_lookup(self) -> None:
        self.assertEqual(Rank.from_raw(3), some(Rank.THREE))
        self.assertEqual(Rank.from_raw(0), none())
        self.assertEqual(Rank.from_raw(14), none())

    def test_suit_descriptions(self) -> None:
        self.assertEqual(Suit.HEARTS.simple_description(), "hearts")

    def test_server_response_variants(self) -> None:
        self.assertEqual(
            describe_response(Result("6:00 am", "8:09 pm")),
            "Sunrise is at 6:00 am and sunset is at 8:09 pm.",
        )
        self.assertEqual(
            describe_response(Failure("Out of cheese.")),
            "Failure... Out of cheese.",
        )
        with self.assertRaises(TypeError):
            describe_response("neither")  # type: ignore[arg-type]

    def test_cards_are_values(self) -> None:
        card = Card(Rank.THREE, Suit.SPADES)
        self.assertEqual(card.simple_description(), "The 3 of spades")
        other = replace(card, rank=Rank.KING)
        self.assertEqual(card.rank, Rank.THREE)
        self.assertEqual(other.simple_description(), "The king of spades")
        self.assertEqual(card, Card(Rank.THREE, Suit.SPADES))
        with self.assertRaises(FrozenInstanceError):
            card.rank = Rank.ACE  # type: ignore[misc]


class FunctionTests(unittest.TestCase):
    def test_greetings(self) -> None:
        self.assertEqual(greet("Bob", "Tuesday"), "Hello Bob, today is Tuesday.")
        self.assertEqual(
            greet_on("John", on="Wednesday"), "Hello, John, today is Wednesday."
        )

    def test_statistics(self) -> None:
        stats = calculate_statistics([5, 3, 100, 3, 9])
        self.assertEqual(stats, Statistics(min=3, max=100, sum=120))
        self.assertEqual(stats[2], 120)
        with self.assertRaises(ValueError):
            calculate_statistics([])

    def test_closures(self) -> None:
        self.assertEqual(return_fifteen(), 15)
        self.assertEqual(make_increment()(7), 8)
        self.assertTrue(has_any_matches([20, 19, 7, 12], less_than_ten))
        self.assertFalse(has_any_matches([20, 19], less_than_ten))


class GenericTests(unittest.TestCase):
    def test_make_array(self) -> None:
        self.assertEqual(make_array("knock", 4), ["knock"] * 4)
        self.assertEqual(make_array(1, 0), [])

    def test_any_common_elements(self) -> None:
        self.assertTrue(any_common_elements([1, 2, 3], [3]))
        self.assertFalse(any_common_elements([1, 2], [3]))
        self.assertTrue(any_common_elements(iter("abc"), iter("cde")))
        self.assertTrue(any_common_elements([[1]], [[1]]))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
