from __future__ import annotations

import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

import copy

from tour.capabilities import (
    DescribedInt,
    Describable,
    SimpleClass,
    SimpleStructure,
    describe_all,
    is_describable,
)


class CapabilityTests(unittest.TestCase):
    def test_wrapped_int_adjusts_to_forty_nine(self) -> None:
        seven = DescribedInt(7)
        self.assertEqual(seven.simple_description, "The number 7")
        seven.adjust()
        self.assertEqual(int(seven), 49)
        self.assertEqual(seven.simple_description, "The number 49")

    def test_custom_step(self) -> None:
        seven = DescribedInt(7, step=7)
        seven.adjust()
        self.assertEqual(seven.value, 14)

    def test_class_and_structure_adjust(self) -> None:
        a = SimpleClass()
        a.adjust()
        self.assertEqual(a.simple_description, "A very simple class.  Now 100% adjusted.")
        self.assertEqual(a.another_property, 69105)
        b = SimpleStructure()
        b.adjust()
        self.assertEqual(b.simple_description, "A simple structure (adjusted)")

    def test_reference_type_shares_adjustments(self) -> None:
        a = SimpleClass()
        alias = a
        alias.adjust()
        self.assertIn("adjusted", a.simple_description)

    def test_value_type_copies_are_independent(self) -> None:
        b = SimpleStructure()
        b_copy = copy.copy(b)
        b_copy.adjust()
        self.assertEqual(b.simple_description, "A simple structure")
        self.assertNotEqual(b, b_copy)

    def test_runtime_conformance(self) -> None:
        for item in (SimpleClass(), SimpleStructure(), DescribedInt(1)):
            with self.subTest(item=item):
                self.assertIsInstance(item, Describable)
                self.assertTrue(is_describable(item))
        self.assertFalse(is_describable(7))
        self.assertFalse(is_describable("text"))

    def test_describe_all_calls_through_protocol(self) -> None:
        items: list[Describable] = [SimpleClass(), SimpleStructure(), DescribedInt(7)]
        self.assertEqual(
            describe_all(items),
            ["A very simple class.", "A simple structure", "The number 7"],
        )


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
