"""
牌组基于属性的测试.

使用hypothesis验证牌组在任意输入下保持的性质：
张数、洗牌不改变牌的多重集合、排序单调、加牌/发牌往返和计分.
"""

import random
from collections import Counter

import pytest
from hypothesis import given, settings, strategies as st

from card_deck import Color, Deck, JokerCard, Rank, StandardCard, Suit

standard_cards = st.builds(StandardCard, st.sampled_from(Suit), st.sampled_from(Rank))
jokers = st.builds(JokerCard, st.sampled_from(Color))
cards_strategy = st.one_of(standard_cards, jokers)
card_lists = st.lists(cards_strategy, max_size=60)
seeds = st.integers(min_value=0, max_value=2 ** 32 - 1)


@pytest.mark.property_test
@settings(max_examples=25)
@given(st.integers(min_value=0, max_value=10))
def test_new_count_size_property(count: int):
    """任意副数的牌组张数为52 * count"""
    deck = Deck.new_count(count)
    assert deck.size() == 52 * count
    assert deck.value() == 340 * count


@pytest.mark.property_test
@given(st.integers(min_value=0, max_value=5), st.integers(min_value=0, max_value=4))
def test_jokers_size_property(num_decks: int, jokers_per_deck: int):
    deck = Deck(num_decks=num_decks, jokers_per_deck=jokers_per_deck)
    assert deck.size() == (52 + jokers_per_deck) * num_decks
    assert sum(card.is_joker for card in deck) == jokers_per_deck * num_decks


@pytest.mark.property_test
@given(card_lists, seeds)
def test_shuffle_preserves_multiset_property(cards, seed: int):
    """洗牌不改变张数和牌的多重集合"""
    deck = Deck.from_cards(cards, rng=random.Random(seed))
    deck.shuffle()
    assert deck.size() == len(cards)
    assert Counter(deck) == Counter(cards)


@pytest.mark.property_test
@given(card_lists)
def test_sort_property(cards):
    """排序后从底到顶sort_key单调不减，且再次排序结果不变"""
    deck = Deck.from_cards(cards)
    deck.sort()
    ranks = [card.sort_key() for card in deck]
    assert ranks == sorted(ranks)

    once = deck.cards
    deck.sort()
    assert deck.cards == once
    assert Counter(deck) == Counter(cards)


@pytest.mark.property_test
@given(st.lists(cards_strategy, min_size=1, max_size=60))
def test_add_draw_round_trip_property(cards):
    """非空牌组上add(draw())恢复张数和顶部的牌"""
    deck = Deck.from_cards(cards)
    top = deck.top()
    deck.add(deck.draw())
    assert deck.size() == len(cards)
    assert deck.top() == top


@pytest.mark.property_test
@given(card_lists, st.integers(min_value=-5, max_value=70))
def test_peek_property(cards, index: int):
    """peek在范围内返回对应的牌，越界返回None"""
    deck = Deck.from_cards(cards)
    if 0 <= index < len(cards):
        assert deck.peek(index) == cards[index]
    else:
        assert deck.peek(index) is None


@pytest.mark.property_test
@given(card_lists)
def test_value_property(cards):
    """牌组点值为各牌点值之和，软计分比硬计分每张A多10点"""
    deck = Deck.from_cards(cards)
    aces = sum(1 for card in cards if not card.is_joker and card.rank is Rank.ACE)
    assert deck.value() == sum(card.value() for card in cards)
    assert deck.value(soft=True) - deck.value(soft=False) == 10 * aces
