import logging
from typing import List
from typing import Sequence

from showdown.errors import ContractViolation
from showdown.hands import Hand
from showdown.tiebreak import untie

logger = logging.getLogger(__name__)


def rank_hands(hands: Sequence[str]) -> List[Hand]:
    """Parse and classify every hand. One malformed hand fails them all."""
    ranked = [Hand.parse(raw) for raw in hands]
    for hand in ranked:
        logger.debug("%r is %s", hand.raw, hand.category.label)

    return ranked


def pick_winners(ranked: List[Hand]) -> List[Hand]:
    if not ranked:
        raise ContractViolation("Cannot pick winners from no hands")

    if len(ranked) == 1:
        return list(ranked)

    best = max(hand.category for hand in ranked)
    return untie([hand for hand in ranked if hand.category == best])


def _winning_hands(hands):
    ranked = rank_hands(hands)

    # Hands with equal cards are equal models, so match winners by identity
    winners = set(id(hand) for hand in pick_winners(ranked))
    for raw, hand in zip(hands, ranked):
        if id(hand) in winners:
            yield raw


def winning_hands(hands: Sequence[str]) -> List[str]:
    """Given hands such as "4S 5S 7H 8D JC", returns the ones that win.

    The returned strings are the caller's own objects, in the order given. Ties
    return every co-winner.
    """
    hands = list(hands)
    if not hands:
        raise ContractViolation("Need at least one hand")

    ret = list(_winning_hands(hands))
    logger.info("Winners: %s", ret)
    return ret
