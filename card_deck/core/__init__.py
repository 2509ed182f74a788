"""
核心基础组件模块.

包含枚举、卡牌、牌组、配置和异常等基础组件.
"""

from .enums import Suit, Rank, Color, STANDARD_SUITS, STANDARD_RANKS, JOKER_COLORS
from .card import Card, StandardCard, JokerCard, is_card, make_card, parse_card
from .deck import Deck, build_standard_cards
from .config import STANDARD_DECK_SIZE, DeckConfig, LoggingConfig, configure_logging
from .exceptions import CardDeckError, InvalidCardError, DeckConfigError, InsufficientCardsError

__all__ = [
    # 枚举类型
    'Suit', 'Rank', 'Color', 'STANDARD_SUITS', 'STANDARD_RANKS', 'JOKER_COLORS',

    # 卡牌相关
    'Card', 'StandardCard', 'JokerCard', 'is_card', 'make_card', 'parse_card',
    'Deck', 'STANDARD_DECK_SIZE', 'build_standard_cards',

    # 配置相关
    'DeckConfig', 'LoggingConfig', 'configure_logging',

    # 异常类型
    'CardDeckError', 'InvalidCardError', 'DeckConfigError', 'InsufficientCardsError',
]
