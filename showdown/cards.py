from enum import Enum
from enum import IntEnum
from typing import Iterable

from pydantic import BaseModel
from pydantic import ConfigDict

from showdown.errors import ContractViolation
from showdown.errors import InvalidFormat

_SUIT_CODEPOINTS = dict(S="♠", H="♡", D="♢", C="♣")


class Rank(IntEnum):
    # The ace is the same physical card at both ends. LOW_ACE only exists so
    # that the ace-low straight compares as five-high.
    LOW_ACE = 1
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
    ACE = 14

    def __str__(self):
        if self in (Rank.LOW_ACE, Rank.ACE):
            return "A"
        if self > Rank.TEN:
            return self.name[0]
        return str(int(self))


class Suit(Enum):
    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"

    def __str__(self):
        return self.value

    def pretty(self):
        return _SUIT_CODEPOINTS[self.value]


# "1" never appears in a token, so the low ace can't be parsed
_RANKS = dict((str(rank), rank) for rank in Rank if rank is not Rank.LOW_ACE)
_SUITS = dict((suit.value, suit) for suit in Suit)


class Card(BaseModel):
    """A playing card.

    Cards compare, hash and sort by rank alone. The suit only matters when
    counting suits for a flush, so two cards of the same rank are equal even
    when their suits differ.
    """

    model_config = ConfigDict(frozen=True)

    rank: Rank
    suit: Suit

    @classmethod
    def parse(cls, token: str) -> "Card":
        """Parse a token such as "10H" or "QS".

        The suit is always the last character, the rank is everything before
        it. Raises InvalidFormat for anything else.
        """
        if len(token) < 2:
            raise InvalidFormat("Card token is too short", token)

        rank = _RANKS.get(token[:-1])
        if rank is None:
            raise InvalidFormat("Unknown rank", token)

        suit = _SUITS.get(token[-1])
        if suit is None:
            raise InvalidFormat("Unknown suit", token)

        return cls(rank=rank, suit=suit)

    def as_low_ace(self) -> "Card":
        if self.rank is not Rank.ACE:
            return self

        return self.model_copy(update=dict(rank=Rank.LOW_ACE))

    def pretty(self):
        return str(self.rank) + self.suit.pretty()

    def __str__(self):
        return str(self.rank) + str(self.suit)

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank

    def __hash__(self):
        return hash(self.rank)

    def __lt__(self, other):
        return self.rank < other.rank


def highest_of(cards: Iterable[Card]) -> Card:
    """Returns a card of the highest rank. Which one is unspecified on ties."""
    cards = list(cards)
    if not cards:
        raise ContractViolation("Cannot take the highest of no cards")

    return max(cards, key=lambda card: card.rank)


def format_cards(cards: Iterable[Card], pretty=False) -> str:
    render = Card.pretty if pretty else Card.__str__
    return "[" + ", ".join(render(card) for card in cards) + "]"
