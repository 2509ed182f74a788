"""
pytest配置文件.

提供牌组测试通用的fixture.
"""

import random

import pytest

from card_deck import Color, Deck, JokerCard, Rank, StandardCard, Suit


@pytest.fixture
def seeded_rng():
    """固定种子的随机数生成器"""
    return random.Random(42)


@pytest.fixture
def standard_deck():
    """一副未洗牌的标准牌组"""
    return Deck()


@pytest.fixture
def empty_deck():
    return Deck.new_empty()


@pytest.fixture
def six_of_spades():
    return StandardCard(Suit.SPADES, Rank.SIX)


@pytest.fixture
def black_joker():
    return JokerCard(Color.BLACK)
