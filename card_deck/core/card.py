"""
扑克牌数据结构.

Card是StandardCard(普通牌)与JokerCard(王牌)的联合类型，
两种变体都是不可变数据类，并提供相同的abs_rank()、sort_key()、value()接口.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Dict, Optional, Tuple, Union

from .enums import Color, Rank, Suit
from .exceptions import InvalidCardError

# 点数 >= 10 的牌统一计为10点
_FACE_VALUE_CAP = 10
_SOFT_ACE_VALUE = 11


@total_ordering
@dataclass(frozen=True)
class StandardCard:
    """
    表示一张普通扑克牌.

    不可变数据类，花色和点数必须同时提供.

    Attributes:
        suit: 花色
        rank: 点数

    Examples:
        >>> card = StandardCard(Suit.SPADES, Rank.SIX)
        >>> str(card)
        'Six of Spades'
        >>> card.abs_rank()
        46
    """

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            InvalidCardError: 当花色或点数类型无效时
        """
        if not isinstance(self.suit, Suit):
            raise InvalidCardError(f"suit must be a Suit, got {self.suit!r}")
        if not isinstance(self.rank, Rank):
            raise InvalidCardError(f"rank must be a Rank, got {self.rank!r}")

    @property
    def is_joker(self) -> bool:
        return False

    def abs_rank(self) -> int:
        """
        返回绝对等级.

        J/Q/K与下一花色的A/2/3等级相同(如梅花K与方块3均为23)，
        因此排序和比较使用sort_key()而不是本值.

        Returns:
            int: 花色序号 * 10 + 点数序号
        """
        return int(self.suit) * 10 + int(self.rank)

    def sort_key(self) -> Tuple[int, int, int]:
        """
        返回排序键.

        所有王牌排在普通牌之前；普通牌以花色为第一排序键，点数为第二排序键.
        """
        return (1, int(self.suit), int(self.rank))

    def value(self, soft: bool = False) -> int:
        """
        返回计分用的点值.

        Args:
            soft: 为True时A计11点，否则计1点

        Returns:
            int: 2-9为牌面值，10/J/Q/K为10，A为1或11
        """
        if self.rank is Rank.ACE:
            return _SOFT_ACE_VALUE if soft else int(Rank.ACE)
        return min(int(self.rank), _FACE_VALUE_CAP)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (StandardCard, JokerCard)):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return f"{self.rank.display_name} of {self.suit.display_name}"

    def __repr__(self) -> str:
        return f"StandardCard({self.rank.name}, {self.suit.name})"


@total_ordering
@dataclass(frozen=True)
class JokerCard:
    """
    表示一张王牌.

    王牌不属于任何花色和点数，只以颜色区分.
    黑色王牌abs_rank为0，红色为1，均低于所有普通牌.
    """

    color: Color

    def __post_init__(self) -> None:
        if not isinstance(self.color, Color):
            raise InvalidCardError(f"color must be a Color, got {self.color!r}")

    @property
    def is_joker(self) -> bool:
        return True

    def abs_rank(self) -> int:
        return 0 if self.color is Color.BLACK else 1

    def sort_key(self) -> Tuple[int, int, int]:
        return (0, self.abs_rank(), 0)

    def value(self, soft: bool = False) -> int:
        """王牌不计分，soft参数仅为保持接口一致."""
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (StandardCard, JokerCard)):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return f"{self.color.display_name} Joker"

    def __repr__(self) -> str:
        return f"JokerCard({self.color.name})"


Card = Union[StandardCard, JokerCard]
CARD_TYPES = (StandardCard, JokerCard)


def is_card(obj: object) -> bool:
    """判断对象是否为StandardCard或JokerCard."""
    return isinstance(obj, CARD_TYPES)


def make_card(
    suit: Optional[Suit] = None,
    rank: Optional[Rank] = None,
    color: Optional[Color] = None,
) -> Card:
    """
    根据可选字段创建对应的卡牌变体.

    花色与点数必须同时提供(普通牌，此时不能提供颜色)，
    或者同时省略并提供颜色(王牌).

    Args:
        suit: 花色
        rank: 点数
        color: 王牌颜色

    Returns:
        Card: StandardCard或JokerCard

    Raises:
        InvalidCardError: 当字段组合不一致时
    """
    if suit is not None and rank is not None:
        if color is not None:
            raise InvalidCardError(
                f"a standard card cannot carry a joker color: {rank!r} of {suit!r}, {color!r}"
            )
        return StandardCard(suit, rank)

    if suit is None and rank is None:
        if color is None:
            raise InvalidCardError("a joker requires a color")
        return JokerCard(color)

    raise InvalidCardError(
        f"suit and rank must be given together, got suit={suit!r}, rank={rank!r}"
    )


_RANK_NAMES: Dict[str, Rank] = {rank.display_name.lower(): rank for rank in Rank}
_SUIT_NAMES: Dict[str, Suit] = {suit.display_name.lower(): suit for suit in Suit}
_COLOR_NAMES: Dict[str, Color] = {color.display_name.lower(): color for color in Color}


def parse_card(text: str) -> Card:
    """
    从显示字符串创建卡牌对象.

    支持"Six of Spades"和"Black Joker"两种格式，大小写不敏感.

    Args:
        text: 卡牌字符串

    Returns:
        Card: 对应的卡牌对象

    Raises:
        InvalidCardError: 当字符串格式无效时
    """
    if not isinstance(text, str):
        raise InvalidCardError(f"card text must be a string, got {type(text).__name__}")

    words = text.strip().lower().split()

    if len(words) == 2 and words[1] == "joker":
        color = _COLOR_NAMES.get(words[0])
        if color is None:
            raise InvalidCardError(f"unknown joker color: {text!r}")
        return JokerCard(color)

    if len(words) == 3 and words[1] == "of":
        rank = _RANK_NAMES.get(words[0])
        suit = _SUIT_NAMES.get(words[2])
        if rank is None or suit is None:
            raise InvalidCardError(f"unknown rank or suit: {text!r}")
        return StandardCard(suit, rank)

    raise InvalidCardError(f"cannot parse card: {text!r}")
