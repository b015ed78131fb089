import logging
from typing import Callable
from typing import Iterable
from typing import List

from showdown.cards import Rank
from showdown.cards import highest_of
from showdown.errors import ContractViolation
from showdown.hands import HAND_SIZE
from showdown.hands import Category
from showdown.hands import Hand

logger = logging.getLogger(__name__)


def _holding(hands: List[Hand], ranks: Iterable[Rank]) -> List[Hand]:
    ranks = list(ranks)
    return [hand for hand in hands if all(hand.has_rank(rank) for rank in ranks)]


def eliminate_by_kickers(
    hands: List[Hand], skip_ranks: Iterable[Rank] = (), rounds: int = HAND_SIZE
) -> List[Hand]:
    """Narrow hands down by comparing kickers, highest first.

    skip_ranks are ranks every hand is already known to tie on (the pair of a
    one pair hand, say). Each round takes the highest rank not yet compared
    from all the remaining hands' cards and drops every hand that doesn't hold
    it. A hand lacking that rank must have a lower card in its place, since all
    higher ranks were held by everyone still in.
    """
    locked = list(skip_ranks)
    candidates = _holding(hands, locked)

    for _ in range(rounds):
        if len(candidates) <= 1:
            break

        pool = [
            card
            for hand in candidates
            for card in hand.cards
            if card.rank not in locked
        ]
        if not pool:
            break

        kicker = highest_of(pool).rank
        locked.append(kicker)
        candidates = _holding(candidates, [kicker])
        logger.debug("Kicker %s leaves %s", kicker, [str(h) for h in candidates])

    return candidates


def _keep_highest(hands: List[Hand], key: Callable[[Hand], Rank]) -> List[Hand]:
    best = max(key(hand) for hand in hands)
    return [hand for hand in hands if key(hand) == best]


def _required(hand: Hand, name: str):
    value = getattr(hand, name)
    if value is None or value == ():
        raise ContractViolation(
            f"A {hand.category.label} hand has no {name}", hand.raw
        )

    return value


def _pair_rank(hand):
    return _required(hand, "pairs")[0].rank


def _pair_ranks(hand):
    pairs = _required(hand, "pairs")
    if len(pairs) != 2:
        raise ContractViolation("Two pairs hand without two pairs", hand.raw)

    # Don't rely on the order pairs were built in
    return sorted((pair.rank for pair in pairs), reverse=True)


def _triplet_rank(hand):
    return _required(hand, "triplet").rank


def _quadruplet_rank(hand):
    return _required(hand, "quadruplet").rank


def _sequence_rank(hand):
    return _required(hand, "sequence").rank


def _untie_high_cards(hands):
    return eliminate_by_kickers(hands)


def _untie_one_pair(hands):
    hands = _keep_highest(hands, _pair_rank)
    return eliminate_by_kickers(hands, [_pair_rank(hands[0])], rounds=3)


def _untie_two_pairs(hands):
    hands = _keep_highest(hands, lambda hand: _pair_ranks(hand)[0])
    hands = _keep_highest(hands, lambda hand: _pair_ranks(hand)[1])
    if len(hands) == 1:
        return hands

    # Both pairs tie, so only the last card is left to compare
    return eliminate_by_kickers(hands, _pair_ranks(hands[0]), rounds=1)


def _untie_three_of_a_kind(hands):
    hands = _keep_highest(hands, _triplet_rank)
    return eliminate_by_kickers(hands, [_triplet_rank(hands[0])], rounds=2)


def _untie_full_house(hands):
    # With the triplet tied, the kickers are the pair
    hands = _keep_highest(hands, _triplet_rank)
    return eliminate_by_kickers(hands, [_triplet_rank(hands[0])], rounds=2)


def _untie_four_of_a_kind(hands):
    hands = _keep_highest(hands, _quadruplet_rank)
    return eliminate_by_kickers(hands, [_quadruplet_rank(hands[0])], rounds=1)


def _untie_straight(hands):
    return _keep_highest(hands, _sequence_rank)


def _untie_royal_flush(hands):
    return hands


_UNTIE = {
    Category.HIGH_CARD: _untie_high_cards,
    Category.ONE_PAIR: _untie_one_pair,
    Category.TWO_PAIRS: _untie_two_pairs,
    Category.THREE_OF_A_KIND: _untie_three_of_a_kind,
    Category.STRAIGHT: _untie_straight,
    Category.FLUSH: _untie_high_cards,
    Category.FULL_HOUSE: _untie_full_house,
    Category.FOUR_OF_A_KIND: _untie_four_of_a_kind,
    Category.STRAIGHT_FLUSH: _untie_straight,
    Category.ROYAL_FLUSH: _untie_royal_flush,
}


def untie(hands: List[Hand]) -> List[Hand]:
    """Returns every hand of the best strength among hands of one category.

    The result holds the same Hand objects, in the order given.
    """
    if not hands:
        raise ContractViolation("Cannot break a tie between no hands")

    hands = list(hands)
    category = hands[0].category
    if any(hand.category != category for hand in hands):
        raise ContractViolation("Tied hands must share a category", hands)

    if len(hands) == 1:
        return hands

    return _UNTIE[category](hands)
