"""
枚举类型单元测试.

测试Suit、Rank、Color枚举以及牌组构建使用的固定顺序.
"""

import pytest

from card_deck import JOKER_COLORS, STANDARD_RANKS, STANDARD_SUITS, Color, Rank, Suit


@pytest.mark.unit
@pytest.mark.fast
class TestEnums:
    """枚举类型测试"""

    def test_suit_ordinals(self):
        """测试花色序号为1-4"""
        assert [int(s) for s in (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES)] == [1, 2, 3, 4]

    def test_rank_ordinals(self):
        """测试点数序号A=1到K=13"""
        assert int(Rank.ACE) == 1
        assert int(Rank.TEN) == 10
        assert int(Rank.KING) == 13
        assert len(Rank) == 13

    def test_display_names(self):
        """测试显示名称"""
        assert Suit.SPADES.display_name == "Spades"
        assert Suit.DIAMONDS.display_name == "Diamonds"
        assert Rank.SIX.display_name == "Six"
        assert Rank.KING.display_name == "King"
        assert Color.BLACK.display_name == "Black"
        assert Color.RED.display_name == "Red"

    def test_standard_orders(self):
        """测试构建牌组使用的固定顺序"""
        assert STANDARD_SUITS == (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES)
        assert STANDARD_RANKS[0] is Rank.ACE
        assert STANDARD_RANKS[-1] is Rank.KING
        assert list(STANDARD_RANKS) == sorted(Rank)
        assert JOKER_COLORS == (Color.BLACK, Color.RED)
