"""Playing cards and server responses: enums, sum types and value structs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union

from tour.optional import OptionalValue, attempt


class Rank(IntEnum):
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def simple_description(self) -> str:
        match self:
            case Rank.ACE | Rank.JACK | Rank.QUEEN | Rank.KING:
                return self.name.lower()
            case _:
                return str(self.value)

    @classmethod
    def from_raw(cls, raw_value: int) -> OptionalValue["Rank"]:
        """Failable lookup by raw value."""
        return attempt(cls, raw_value, errors=(ValueError,))


class Suit(Enum):
    SPADES = "spades"
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"

    def simple_description(self) -> str:
        return self.value


@dataclass(frozen=True)
class Result:
    sunrise: str
    sunset: str


@dataclass(frozen=True)
class Failure:
    message: str


ServerResponse = Union[Result, Failure]


def describe_response(response: ServerResponse) -> str:
    match response:
        case Result(sunrise, sunset):
            return f"Sunrise is at {sunrise} and sunset is at {sunset}."
        case Failure(message):
            return f"Failure... {message}"
    raise TypeError(f"not a server response: {response!r}")


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    def simple_description(self) -> str:
        return (
            f"The {self.rank.simple_description()} "
            f"of {self.suit.simple_description()}"
        )
