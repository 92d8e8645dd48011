"""Enumerations, associated values and value-semantics structures."""

from __future__ import annotations

from dataclasses import replace

from tour.cards import Card, Failure, Rank, Result, Suit, describe_response


def demo_1_raw_values() -> None:
    """IntEnum members carry a raw value and methods."""
    ace = Rank.ACE
    three_description = Rank.from_raw(3).chain(Rank.simple_description)
    missing = Rank.from_raw(99)
    print(
        "1. ranks:",
        ace.value,
        ace.simple_description(),
        three_description,
        missing,
        sep=" | ",
    )


def demo_2_plain_enum() -> None:
    hearts = Suit.HEARTS
    print("2. suit:", hearts, hearts.simple_description(), sep=" | ")


def demo_3_associated_values() -> None:
    """Each variant dataclass carries its own payload."""
    success = Result("6:00 am", "8:09 pm")
    failure = Failure("Out of cheese.")
    print(
        "3. responses:",
        describe_response(success),
        describe_response(failure),
        sep=" | ",
    )


def demo_4_value_structs() -> None:
    """Frozen dataclasses behave as values: updates build a new card."""
    three_of_spades = Card(Rank.THREE, Suit.SPADES)
    three_of_hearts = replace(three_of_spades, suit=Suit.HEARTS)
    print(
        "4. cards:",
        three_of_spades.simple_description(),
        three_of_hearts.simple_description(),
        three_of_spades == Card(Rank.THREE, Suit.SPADES),
        sep=" | ",
    )


def run_all() -> None:
    demo_1_raw_values()
    demo_2_plain_enum()
    demo_3_associated_values()
    demo_4_value_structs()


if __name__ == "__main__":
    run_all()
