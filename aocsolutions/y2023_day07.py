"""Camel cards: rank poker-like hands and total their winnings."""

from __future__ import annotations

import argparse
import enum
from collections import Counter

from aocsolutions.runner import run


class Card(enum.IntEnum):
    """Card strengths, weakest first; the jack ranks below the two."""

    JACK = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    QUEEN = 10
    KING = 11
    ACE = 12


_CARDS = {
    "2": Card.TWO,
    "3": Card.THREE,
    "4": Card.FOUR,
    "5": Card.FIVE,
    "6": Card.SIX,
    "7": Card.SEVEN,
    "8": Card.EIGHT,
    "9": Card.NINE,
    "T": Card.TEN,
    "J": Card.JACK,
    "Q": Card.QUEEN,
    "K": Card.KING,
    "A": Card.ACE,
}


class HandType(enum.IntEnum):
    """Kinds of hand, weakest first."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


def parse_card(char: str) -> Card:
    """The card a label such as ``A`` or ``7`` stands for."""
    try:
        return _CARDS[char]
    except KeyError:
        raise ValueError(f"no valid card: {char!r}") from None


def hand_type(hand: str) -> HandType:
    """Classify a hand of at most five cards by how often each label occurs."""
    frequencies = [0] * 5
    for count in Counter(hand).values():
        if count > 5:
            raise ValueError(f"no valid hand: {hand!r}")
        frequencies[count - 1] += 1
    match frequencies:
        case [0, 0, 0, 0, 1]:
            return HandType.FIVE_OF_A_KIND
        case [_, 0, 0, 1, 0]:
            return HandType.FOUR_OF_A_KIND
        case [0, 1, 1, 0, 0]:
            return HandType.FULL_HOUSE
        case [_, 0, 1, 0, 0]:
            return HandType.THREE_OF_A_KIND
        case [_, 2, 0, 0, 0]:
            return HandType.TWO_PAIR
        case [_, 1, 0, 0, 0]:
            return HandType.ONE_PAIR
        case [_, 0, 0, 0, 0]:
            return HandType.HIGH_CARD
    raise ValueError(f"no valid hand: {hand!r}")


_UPGRADES = {
    (1, HandType.HIGH_CARD): HandType.ONE_PAIR,
    (1, HandType.ONE_PAIR): HandType.THREE_OF_A_KIND,
    (1, HandType.TWO_PAIR): HandType.FULL_HOUSE,
    (1, HandType.THREE_OF_A_KIND): HandType.FOUR_OF_A_KIND,
    (1, HandType.FOUR_OF_A_KIND): HandType.FIVE_OF_A_KIND,
    (2, HandType.HIGH_CARD): HandType.THREE_OF_A_KIND,
    (2, HandType.ONE_PAIR): HandType.FOUR_OF_A_KIND,
    (2, HandType.TWO_PAIR): HandType.FOUR_OF_A_KIND,
    (2, HandType.THREE_OF_A_KIND): HandType.FIVE_OF_A_KIND,
    (3, HandType.HIGH_CARD): HandType.FOUR_OF_A_KIND,
    (3, HandType.ONE_PAIR): HandType.FIVE_OF_A_KIND,
    (4, HandType.HIGH_CARD): HandType.FIVE_OF_A_KIND,
}


def adjust_hand_type(number_of_jokers: int, hand_type: HandType) -> HandType:
    """The best hand reachable when jokers join the rest of the hand."""
    if number_of_jokers == 5:
        return HandType.FIVE_OF_A_KIND
    return _UPGRADES.get((number_of_jokers, hand_type), hand_type)


def _split(line: str) -> tuple[str, int]:
    hand, sep, bid = line.partition(" ")
    if not sep:
        raise ValueError(f"either hand or bid not present: {line!r}")
    return hand, int(bid)


def _winnings(hands: list[tuple[HandType, tuple[Card, ...], int]]) -> int:
    hands.sort(key=lambda hand: (hand[0], hand[1]))
    return sum(rank * bid for rank, (_, _, bid) in enumerate(hands, start=1))


def solve_part_1(text: str) -> int:
    """Total winnings with every card counting at face value."""
    hands = []
    for line in text.splitlines():
        hand, bid = _split(line)
        hands.append((hand_type(hand), tuple(parse_card(char) for char in hand), bid))
    return _winnings(hands)


def solve_part_2(text: str) -> int:
    """Total winnings with jacks acting as jokers."""
    hands = []
    for line in text.splitlines():
        hand, bid = _split(line)
        rest = hand.replace("J", "")
        kind = adjust_hand_type(len(hand) - len(rest), hand_type(rest))
        hands.append((kind, tuple(parse_card(char) for char in hand), bid))
    return _winnings(hands)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Rank camel card hands.")
    parser.add_argument("data_dir", nargs="?", default="data")
    args = parser.parse_args(argv)
    run(solve_part_1, solve_part_2, args.data_dir)