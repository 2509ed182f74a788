"""
扑克牌基础枚举定义.

定义花色、点数和王牌颜色，以及构建标准牌组时使用的固定顺序.
"""

from enum import Enum, IntEnum
from typing import Tuple


class Suit(IntEnum):
    """
    扑克牌花色枚举.

    数值即花色序号(1-4)，参与abs_rank和sort_key计算.
    """

    CLUBS = 1       # 梅花
    DIAMONDS = 2    # 方块
    HEARTS = 3      # 红桃
    SPADES = 4      # 黑桃

    @property
    def display_name(self) -> str:
        """返回花色的显示名称，如"Spades"."""
        return self.name.capitalize()


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    数值即点数序号，A为1，K为13.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def display_name(self) -> str:
        """返回点数的显示名称，如"Six"."""
        return self.name.capitalize()


class Color(Enum):
    """王牌颜色枚举"""

    RED = "red"
    BLACK = "black"

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


# 构建标准牌组时的固定顺序
STANDARD_SUITS: Tuple[Suit, ...] = (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES)
STANDARD_RANKS: Tuple[Rank, ...] = (
    Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.SIX, Rank.SEVEN,
    Rank.EIGHT, Rank.NINE, Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING,
)

# 每副牌附带王牌时的颜色轮换顺序
JOKER_COLORS: Tuple[Color, ...] = (Color.BLACK, Color.RED)
