import pytest

from showdown.cards import Rank
from showdown.errors import ContractViolation
from showdown.hands import Hand
from showdown.tiebreak import eliminate_by_kickers
from showdown.tiebreak import untie


def _untie(*raws):
    return [hand.raw for hand in untie([Hand.parse(raw) for raw in raws])]


def test_high_card():
    assert _untie(
        "4S 5S 7H 8D JC", "3S 4S 5D 6H JH", "3H 4H 5C 6C JD"
    ) == ["4S 5S 7H 8D JC"]

    # Tied all the way down
    assert _untie("3S 4S 5D 6H JH", "3H 4H 5C 6C JD") == [
        "3S 4S 5D 6H JH",
        "3H 4H 5C 6C JD",
    ]

    # Decided by the last card
    assert _untie("2S 5S 7H 8D JC", "3S 5D 7C 8H JH") == ["3S 5D 7C 8H JH"]


def test_flush():
    assert _untie("2S 4S 5S 6S 7S", "3H 4H 5H 6H 8H") == ["3H 4H 5H 6H 8H"]
    assert _untie("4H 7H 8H 9H 6H", "2S 4S 5S 6S 7S") == ["4H 7H 8H 9H 6H"]


def test_one_pair():
    # Higher pair wins regardless of kickers
    assert _untie("5S 5H 2C 3D 4H", "4S 4H AH KD QC") == ["5S 5H 2C 3D 4H"]

    # Same pair, kickers decide
    assert _untie("4S 4H 7H 8D JC", "4D 4C 7S 8C QC") == ["4D 4C 7S 8C QC"]
    assert _untie("4S 4H 7H 8D JC", "4D 4C 6S 8C JD") == ["4S 4H 7H 8D JC"]

    assert _untie("4S 4H 7H 8D JC", "4D 4C 7S 8C JD") == [
        "4S 4H 7H 8D JC",
        "4D 4C 7S 8C JD",
    ]


def test_two_pairs():
    # Highest pair wins
    assert _untie("2S 8H 2D 8D 3H", "4S 5H 4C 3S 5D") == ["2S 8H 2D 8D 3H"]

    # Then the second pair
    assert _untie("KD KS 10H 10D 2C", "KH KC 9S 9C AD") == ["KD KS 10H 10D 2C"]

    # Then the kicker
    assert _untie("JD QH JS 8D QC", "JS QS JC 2D QD") == ["JD QH JS 8D QC"]

    assert _untie("JD QH JS 8D QC", "JS QS JC 8H QD") == [
        "JD QH JS 8D QC",
        "JS QS JC 8H QD",
    ]


def test_two_pairs_ignores_pair_order():
    low_first = Hand.parse("KD KS 10H 10D 2C")
    low_first = low_first.model_copy(update=dict(pairs=tuple(reversed(low_first.pairs))))
    other = Hand.parse("KH KC 9S 9C AD")

    assert untie([other, low_first]) == [low_first]


def test_three_of_a_kind():
    assert _untie("2S 2H 2C 8D JH", "4S AH AS 8C AD") == ["4S AH AS 8C AD"]
    assert _untie("4S AH AS 7C AD", "4S AH AS 8C AD") == ["4S AH AS 8C AD"]
    assert _untie("3S AH AS 8C AD", "4S AH AS 8C AD") == ["4S AH AS 8C AD"]


def test_full_house():
    assert _untie("4H 4S 4D 9S 9D", "5H 5S 5D 8S 8D") == ["5H 5S 5D 8S 8D"]

    # Same triplet, the pair decides
    assert _untie("4H 4S 4D 9S 9D", "4H 4S 4D 8S 8D") == ["4H 4S 4D 9S 9D"]

    # Same hand in a different order
    assert _untie("3S 3H 2S 2H 2C", "2S 2H 2C 3S 3H") == [
        "3S 3H 2S 2H 2C",
        "2S 2H 2C 3S 3H",
    ]


def test_four_of_a_kind():
    assert _untie("2S 2H 2C 8D 2D", "4S 5H 5S 5D 5C") == ["4S 5H 5S 5D 5C"]
    assert _untie("2H 2D 2C 2S 4S", "2H 2D 2C 2S 5S") == ["2H 2D 2C 2S 5S"]
    assert _untie("3S 3H 2S 3D 3C", "3S 3H 4S 3D 3C") == ["3S 3H 4S 3D 3C"]


def test_straight():
    assert _untie("4S 6C 7S 8D 5H", "5S 7H 8S 9D 6H") == ["5S 7H 8S 9D 6H"]

    # The ace-low straight is five high
    assert _untie("AD 2H 3S 4D 5C", "2C 3H 4S 5D 6H") == ["2C 3H 4S 5D 6H"]
    assert _untie("AD 2H 3S 4D 5C", "AC 2D 3H 4S 5H") == [
        "AD 2H 3S 4D 5C",
        "AC 2D 3H 4S 5H",
    ]
    assert _untie("10D JH QS KD AC", "9C 10H JS QD KH") == ["10D JH QS KD AC"]


def test_straight_flush():
    assert _untie("AH 2H 3H 4H 5H", "2D 3D 4D 5D 6D") == ["2D 3D 4D 5D 6D"]
    assert _untie("4H 6H 7H 8H 5H", "5S 7S 8S 9S 6S") == ["5S 7S 8S 9S 6S"]


def test_royal_flush():
    assert _untie("10H JH QH KH AH", "10S JS QS KS AS") == [
        "10H JH QH KH AH",
        "10S JS QS KS AS",
    ]


def test_returns_same_hands():
    hands = [Hand.parse("4S 5S 7H 8D JC"), Hand.parse("3S 4S 5D 6H JH")]
    winners = untie(hands)
    assert len(winners) == 1
    assert winners[0] is hands[0]

    single = [Hand.parse("2S 3S 4H 6D 7C")]
    assert untie(single)[0] is single[0]


def test_eliminate_by_kickers():
    hands = [Hand.parse("4S 4H 7H 8D JC"), Hand.parse("4D 4C 7S 9C 10C")]

    # One round only looks at the highest kicker
    assert eliminate_by_kickers(hands, [Rank.FOUR], rounds=1) == [hands[0]]

    # Hands without every skipped rank drop out before any kicker is compared
    survivors = eliminate_by_kickers(hands, [Rank.FOUR, Rank.JACK], rounds=1)
    assert survivors == [hands[0]]

    assert eliminate_by_kickers(hands[:1]) == hands[:1]


def test_untie_contract():
    with pytest.raises(ContractViolation):
        untie([])

    with pytest.raises(ContractViolation):
        untie([Hand.parse("4S 5S 7H 8D JC"), Hand.parse("4S 4H 7H 8D JC")])

    # A one pair hand that lost its pair
    broken = Hand.parse("4S 4H 7H 8D JC").model_copy(update=dict(pairs=()))
    with pytest.raises(ContractViolation):
        untie([broken, Hand.parse("5S 5H 7H 8D JC")])
