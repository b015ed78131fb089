from collections import Counter
from enum import IntEnum
from typing import Iterable
from typing import List
from typing import Optional
from typing import Tuple

from pydantic import BaseModel
from pydantic import ConfigDict

from showdown.cards import Card
from showdown.cards import Rank
from showdown.cards import Suit
from showdown.cards import format_cards
from showdown.errors import ContractViolation
from showdown.errors import InvalidFormat

HAND_SIZE = 5


class Category(IntEnum):
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIRS = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def label(self):
        return self.name.replace("_", " ").lower()


class _Grouping(BaseModel):
    model_config = ConfigDict(frozen=True)

    rank: Rank
    cards: Tuple[Card, ...]


class Pair(_Grouping):
    pass


class Triplet(_Grouping):
    pass


class Quadruplet(_Grouping):
    pass


class Sequence(_Grouping):
    # rank is the top of the run: FIVE for the ace-low straight
    pass


# Ranks a physical card can have. Counting groups over these keeps the low ace
# copy from being mistaken for a second pair.
_PHYSICAL_RANKS = [Rank(value) for value in range(Rank.TWO, Rank.ACE + 1)]


def rank_counts(cards: Iterable[Card]) -> List[int]:
    """Count cards per rank, indexed by rank ordinal.

    Slot 0 is unused. An ace is counted in slot 14 and copied onto slot 1, so a
    window over slots 1..5 sees the ace-low straight like any other run.
    """
    counts = [0] * (Rank.ACE + 1)
    for card in cards:
        counts[card.rank] += 1

    counts[Rank.LOW_ACE] = counts[Rank.ACE]
    return counts


def suit_counts(cards: Iterable[Card]) -> Counter:
    return Counter(card.suit for card in cards)


def _ranks_with_count(counts, n) -> List[Rank]:
    # Highest rank first
    return [rank for rank in reversed(_PHYSICAL_RANKS) if counts[rank] == n]


def is_flush(suits: Counter) -> bool:
    return any(suits[suit] == HAND_SIZE for suit in Suit)


def is_straight(counts: List[int]) -> bool:
    def run_from(low):
        return all(counts[rank] == 1 for rank in range(low, low + HAND_SIZE))

    any_run = any(run_from(low) for low in range(Rank.LOW_ACE, Rank.TEN + 1))

    # K-A-2 doesn't wrap around
    wraps = counts[Rank.KING] == 1 and counts[Rank.ACE] == 1 and counts[Rank.TWO] == 1

    ace_low = run_from(Rank.LOW_ACE) and counts[Rank.ACE] == 1

    return (any_run and not wraps) or ace_low


def is_high_sequence(counts: List[int]) -> bool:
    return all(counts[rank] == 1 for rank in range(Rank.TEN, Rank.ACE + 1))


def classify(cards: List[Card]) -> Category:
    if len(cards) != HAND_SIZE:
        raise ContractViolation(f"Cannot classify {len(cards)} cards")

    counts = rank_counts(cards)
    flush = is_flush(suit_counts(cards))
    straight = is_straight(counts)

    if flush and straight:
        if is_high_sequence(counts):
            return Category.ROYAL_FLUSH
        return Category.STRAIGHT_FLUSH

    if _ranks_with_count(counts, 4):
        return Category.FOUR_OF_A_KIND

    triplets = _ranks_with_count(counts, 3)
    pairs = _ranks_with_count(counts, 2)

    if triplets and pairs:
        return Category.FULL_HOUSE

    if flush:
        return Category.FLUSH

    if straight:
        return Category.STRAIGHT

    if triplets:
        return Category.THREE_OF_A_KIND

    if len(pairs) == 2:
        return Category.TWO_PAIRS

    if pairs:
        return Category.ONE_PAIR

    return Category.HIGH_CARD


def _collect(cards, rank):
    return tuple(card for card in cards if card.rank == rank)


def triplet_of(cards: List[Card]) -> Optional[Triplet]:
    ranks = _ranks_with_count(rank_counts(cards), 3)
    if not ranks:
        return None

    return Triplet(rank=ranks[0], cards=_collect(cards, ranks[0]))


def quadruplet_of(cards: List[Card]) -> Optional[Quadruplet]:
    ranks = _ranks_with_count(rank_counts(cards), 4)
    if not ranks:
        return None

    return Quadruplet(rank=ranks[0], cards=_collect(cards, ranks[0]))


def pairs_of(cards: List[Card]) -> Tuple[Pair, ...]:
    ranks = _ranks_with_count(rank_counts(cards), 2)
    return tuple(Pair(rank=rank, cards=_collect(cards, rank)) for rank in ranks)


def sequence_of(cards: List[Card]) -> Optional[Sequence]:
    if not is_straight(rank_counts(cards)):
        return None

    ordered = sorted(cards)

    # A-2-3-4-5 sorts as 2-3-4-5-A. Play the ace low so the run is five-high.
    if ordered[0].rank == Rank.TWO and ordered[-1].rank == Rank.ACE:
        ordered = sorted(card.as_low_ace() for card in ordered)

    return Sequence(rank=ordered[-1].rank, cards=tuple(ordered))


_PAIRED = (Category.ONE_PAIR, Category.TWO_PAIRS, Category.FULL_HOUSE)
_TRIPLED = (Category.THREE_OF_A_KIND, Category.FULL_HOUSE)
_SEQUENCED = (Category.STRAIGHT, Category.STRAIGHT_FLUSH, Category.ROYAL_FLUSH)


class Hand(BaseModel):
    """Five cards, sorted ascending by rank, and what they make.

    raw is the text the hand was parsed from. The groupings are only filled in
    for the categories they describe: a full house has a triplet and one pair,
    a two pair hand has two pairs (highest first) and nothing else.
    """

    model_config = ConfigDict(frozen=True)

    raw: str
    cards: Tuple[Card, ...]
    category: Category

    pairs: Tuple[Pair, ...] = ()
    triplet: Optional[Triplet] = None
    quadruplet: Optional[Quadruplet] = None
    sequence: Optional[Sequence] = None

    @classmethod
    def parse(cls, raw: str) -> "Hand":
        tokens = raw.split()
        if len(tokens) != HAND_SIZE:
            raise InvalidFormat(
                f"A hand has {HAND_SIZE} cards, found {len(tokens)}", raw
            )

        return cls.from_cards([Card.parse(token) for token in tokens], raw)

    @classmethod
    def from_cards(cls, cards: List[Card], raw: str) -> "Hand":
        cards = sorted(cards)
        category = classify(cards)

        groupings = dict()
        if category in _PAIRED:
            groupings["pairs"] = pairs_of(cards)
        if category in _TRIPLED:
            groupings["triplet"] = triplet_of(cards)
        if category == Category.FOUR_OF_A_KIND:
            groupings["quadruplet"] = quadruplet_of(cards)
        if category in _SEQUENCED:
            groupings["sequence"] = sequence_of(cards)

        return cls(raw=raw, cards=tuple(cards), category=category, **groupings)

    def has_rank(self, rank: Rank) -> bool:
        return any(card.rank == rank for card in self.cards)

    def describe(self, pretty=False):
        return f"{format_cards(self.cards, pretty=pretty)} {self.category.label}"

    def __str__(self):
        return self.raw
