"""
Standard playing-card deck library.

Provides card identity (suits, ranks and jokers), a total ranking order,
and deck operations for card games: construction, shuffling, sorting,
drawing and blackjack-style value computation.
"""

import logging

from .core import (
    Suit, Rank, Color, STANDARD_SUITS, STANDARD_RANKS, JOKER_COLORS,
    Card, StandardCard, JokerCard, is_card, make_card, parse_card,
    Deck, STANDARD_DECK_SIZE, build_standard_cards,
    DeckConfig, LoggingConfig, configure_logging,
    CardDeckError, InvalidCardError, DeckConfigError, InsufficientCardsError,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def new_deck(shuffle: bool = True, num_decks: int = 1, jokers_per_deck: int = 0) -> Deck:
    """Create a new deck of cards.

    Args:
        shuffle: Whether to shuffle the deck after creation.
        num_decks: Number of standard 52-card sets to concatenate.
        jokers_per_deck: Jokers appended after each standard set.

    Returns:
        A new deck of cards.
    """
    deck = Deck(num_decks=num_decks, jokers_per_deck=jokers_per_deck)
    if shuffle:
        deck.shuffle()
    return deck


__all__ = [
    'Suit', 'Rank', 'Color', 'STANDARD_SUITS', 'STANDARD_RANKS', 'JOKER_COLORS',
    'Card', 'StandardCard', 'JokerCard', 'is_card', 'make_card', 'parse_card',
    'Deck', 'STANDARD_DECK_SIZE', 'build_standard_cards',
    'DeckConfig', 'LoggingConfig', 'configure_logging',
    'CardDeckError', 'InvalidCardError', 'DeckConfigError', 'InsufficientCardsError',
    'new_deck',
]
