from __future__ import annotations

import gc
import sys
import unittest
import weakref
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from tour import optional
from tour.optional import Nothing, Some, attempt, from_nullable, none, some


def _unreachable() -> object:
    raise AssertionError("absent branch must not run")


class Payload:
    pass


class OptionalValueTests(unittest.TestCase):
    def test_some_round_trips_through_match(self) -> None:
        for value in (0, "", "Ada", [1, 2], None, Payload()):
            with self.subTest(value=value):
                self.assertIs(some(value).match(lambda v: v, _unreachable), value)

    def test_none_runs_only_the_absent_branch(self) -> None:
        calls: list[str] = []
        result = none().match(
            lambda v: calls.append("some"), lambda: calls.append("none") or "empty"
        )
        self.assertEqual(result, "empty")
        self.assertEqual(calls, ["none"])

    def test_unwrap_or_uses_default_only_when_absent(self) -> None:
        self.assertEqual(none().unwrap_or("Guest"), "Guest")
        self.assertEqual(some("Ada").unwrap_or("Guest"), "Ada")
        self.assertEqual(some(0).unwrap_or(5), 0)
        self.assertIsNone(some(None).unwrap_or("default"))

    def test_iteration_binds_only_when_present(self) -> None:
        greeting = "Hello!"
        for name in some("John Appleseed"):
            greeting = f"Hello, {name}"
        self.assertEqual(greeting, "Hello, John Appleseed")

        entered = False
        for _ in none():
            entered = True
        self.assertFalse(entered)

    def test_match_statement_over_variants(self) -> None:
        def show(value: optional.OptionalValue[int]) -> str:
            match value:
                case Some(number):
                    return f"some {number}"
                case Nothing():
                    return "none"
            return "unreachable"

        self.assertEqual(show(some(100)), "some 100")
        self.assertEqual(show(none()), "none")

    def test_chain_short_circuits(self) -> None:
        self.assertEqual(some(2.5).chain(lambda x: x * 2), Some(5.0))
        self.assertIs(none().chain(_unreachable), optional.NOTHING)

    def test_truthiness_and_equality(self) -> None:
        self.assertTrue(some(0))
        self.assertFalse(none())
        self.assertEqual(some(1), some(1))
        self.assertNotEqual(some(1), none())
        self.assertEqual(len({some("a"), some("a"), none()}), 2)

    def test_variants_are_immutable(self) -> None:
        value = some(1)
        with self.assertRaises(AttributeError):
            value.value = 2  # type: ignore[misc]

    def test_no_unchecked_unwrap(self) -> None:
        self.assertFalse(hasattr(some(1), "unwrap"))
        self.assertFalse(hasattr(none(), "unwrap"))

    def test_rebinding_releases_payload(self) -> None:
        payload = Payload()
        ref = weakref.ref(payload)
        holder = none()
        holder = some(payload)
        self.assertIs(holder.unwrap_or(None), payload)
        del payload
        holder = none()
        gc.collect()
        self.assertIsNone(ref())
        self.assertTrue(holder.is_none())

    def test_from_nullable(self) -> None:
        self.assertEqual(from_nullable(None), none())
        self.assertEqual(from_nullable(0), some(0))

    def test_attempt_discards_listed_errors(self) -> None:
        self.assertEqual(attempt(int, "42"), some(42))
        self.assertEqual(attempt(int, "nope", errors=(ValueError,)), none())

    def test_attempt_propagates_other_errors(self) -> None:
        with self.assertRaises(TypeError):
            attempt(int, object(), errors=(ValueError,))

    def test_base_class_is_abstract(self) -> None:
        with self.assertRaises(TypeError):
            optional.OptionalValue()  # type: ignore[abstract]
        self.assertIsInstance(some(1), optional.OptionalValue)
        self.assertIsInstance(none(), optional.OptionalValue)

    def test_repr(self) -> None:
        self.assertEqual(repr(some("Ada")), "Some('Ada')")
        self.assertEqual(repr(none()), "Nothing()")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
