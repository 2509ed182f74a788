"""
扑克牌组管理.

定义Deck类，管理一个有序、可变的卡牌序列.
序列末尾为牌组顶部，发牌从顶部取出.
"""

import logging
import random
from typing import Iterable, Iterator, List, Optional

from .card import Card, JokerCard, StandardCard, is_card
from .config import DeckConfig
from .enums import JOKER_COLORS, STANDARD_RANKS, STANDARD_SUITS, Rank, Suit
from .exceptions import DeckConfigError, InsufficientCardsError, InvalidCardError

logger = logging.getLogger(__name__)


def build_standard_cards(num_decks: int = 1, jokers_per_deck: int = 0) -> List[Card]:
    """
    按固定顺序生成标准牌.

    每副牌依次为梅花、方块、红桃、黑桃，每种花色A到K，
    之后追加jokers_per_deck张王牌(黑、红交替).

    Args:
        num_decks: 牌副数
        jokers_per_deck: 每副牌的王牌数

    Returns:
        List[Card]: 生成的牌列表
    """
    cards: List[Card] = []
    for _ in range(num_decks):
        cards.extend(
            StandardCard(suit, rank)
            for suit in STANDARD_SUITS
            for rank in STANDARD_RANKS
        )
        cards.extend(
            JokerCard(JOKER_COLORS[i % len(JOKER_COLORS)])
            for i in range(jokers_per_deck)
        )
    return cards


class Deck:
    """
    表示一个牌组.

    默认包含一副52张标准牌(不含王牌)，支持多副牌合并、洗牌、排序、
    查看、发牌、加牌和计分等操作. 使用可选的随机数生成器以支持确定性测试.

    Attributes:
        _cards: 当前牌组中的牌列表，末尾为顶部
        _rng: 随机数生成器

    Examples:
        >>> deck = Deck()
        >>> deck.size()
        52
        >>> str(deck.draw())
        'King of Spades'
        >>> deck.size()
        51
    """

    def __init__(
        self,
        num_decks: int = 1,
        jokers_per_deck: int = 0,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        初始化牌组.

        Args:
            num_decks: 标准牌副数，0表示空牌组
            jokers_per_deck: 每副牌附带的王牌数
            rng: 随机数生成器，用于洗牌操作
            seed: 随机种子，用于创建随机数生成器，不能与rng同时提供

        Raises:
            DeckConfigError: 当牌副数或王牌数无效，或同时提供rng和seed时
        """
        if rng is not None and seed is not None:
            raise DeckConfigError("rng and seed cannot both be given")

        self._config = DeckConfig(
            num_decks=num_decks,
            jokers_per_deck=jokers_per_deck,
            random_seed=seed,
        )
        self._rng = rng or random.Random(seed)
        self._initial_cards: List[Card] = build_standard_cards(
            self._config.num_decks, self._config.jokers_per_deck
        )
        self._cards: List[Card] = []
        self.reset()

    @classmethod
    def new(cls, rng: Optional[random.Random] = None) -> 'Deck':
        """创建一副52张标准牌."""
        return cls(rng=rng)

    @classmethod
    def new_count(cls, count: int, rng: Optional[random.Random] = None) -> 'Deck':
        """
        创建由count副标准牌依次拼接而成的牌组.

        Raises:
            DeckConfigError: 当count为负数或不是整数时
        """
        return cls(num_decks=count, rng=rng)

    @classmethod
    def new_empty(cls, rng: Optional[random.Random] = None) -> 'Deck':
        """创建空牌组."""
        return cls(num_decks=0, rng=rng)

    @classmethod
    def from_config(cls, config: DeckConfig) -> 'Deck':
        return cls(
            num_decks=config.num_decks,
            jokers_per_deck=config.jokers_per_deck,
            seed=config.random_seed,
        )

    @classmethod
    def from_cards(cls, cards: Iterable[Card], rng: Optional[random.Random] = None) -> 'Deck':
        """
        用给定的牌创建牌组，保持原顺序(最后一张为顶部).

        Raises:
            InvalidCardError: 当序列中包含非卡牌对象时
        """
        deck = cls.new_empty(rng=rng)
        for card in cards:
            deck.add(card)
        deck._initial_cards = deck._cards.copy()
        return deck

    def reset(self) -> None:
        """
        将牌组恢复到创建时的牌和顺序.

        按副数构建的牌组恢复为未洗牌的标准牌；
        from_cards和filter创建的牌组恢复为创建时给定的牌.
        """
        self._cards = self._initial_cards.copy()
        logger.debug("Deck reset to %d cards", len(self._cards))

    def empty(self) -> None:
        """清空牌组."""
        self._cards.clear()
        logger.debug("Deck emptied")

    def size(self) -> int:
        """返回牌组中的牌数."""
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    @property
    def cards(self) -> List[Card]:
        """牌组中所有牌的副本，从底部到顶部."""
        return self._cards.copy()

    def peek(self, index: int) -> Optional[Card]:
        """
        查看指定位置的牌但不取出.

        Args:
            index: 位置，0为底部，size()-1为顶部

        Returns:
            Optional[Card]: 该位置的牌，越界(含负数)时返回None
        """
        if 0 <= index < len(self._cards):
            return self._cards[index]
        return None

    # 与peek相同
    peak = peek

    def top(self) -> Optional[Card]:
        """
        查看顶部的牌但不取出.

        Returns:
            Optional[Card]: 顶部的牌，牌组为空时返回None
        """
        return self.peek(len(self._cards) - 1)

    def draw(self) -> Optional[Card]:
        """
        从顶部取出一张牌.

        Returns:
            Optional[Card]: 取出的牌，牌组为空时返回None
        """
        if not self._cards:
            logger.debug("Draw from empty deck")
            return None
        return self._cards.pop()

    def draw_many(self, count: int) -> List[Card]:
        """
        从顶部依次取出多张牌.

        Args:
            count: 要取出的牌数

        Returns:
            List[Card]: 按取出顺序排列的牌

        Raises:
            ValueError: 当count为负数或不是整数时
            InsufficientCardsError: 当牌组中的牌不足时，此时牌组不变
        """
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValueError(f"Count must be an integer, got {count!r}")
        if count < 0:
            raise ValueError("Count must be non-negative")
        if count > len(self._cards):
            raise InsufficientCardsError(
                f"Cannot draw {count} cards, only {len(self._cards)} remaining"
            )

        return [self._cards.pop() for _ in range(count)]

    def add(self, card: Card) -> None:
        """
        将一张牌放到顶部.

        Raises:
            InvalidCardError: 当card不是卡牌对象时
        """
        if not is_card(card):
            raise InvalidCardError(f"Only cards can be added to a deck, got {card!r}")
        self._cards.append(card)

    def sort(self, reverse: bool = False) -> None:
        """
        按sort_key()稳定排序: 王牌在前，普通牌按花色、点数排列.

        Args:
            reverse: 为True时降序排列
        """
        self._cards.sort(key=lambda card: card.sort_key(), reverse=reverse)
        logger.debug("Deck sorted (%s)", "descending" if reverse else "ascending")

    def shuffle(self) -> None:
        """
        洗牌.

        使用Fisher-Yates洗牌算法随机打乱牌的顺序.
        """
        self._rng.shuffle(self._cards)
        logger.debug("Deck of %d cards shuffled", len(self._cards))

    def value(self, soft: bool = False) -> int:
        """
        计算牌组中所有牌的点值之和.

        Args:
            soft: 为True时A计11点

        Returns:
            int: 点值总和，空牌组为0
        """
        return sum(card.value(soft) for card in self._cards)

    def filter(
        self,
        suits: Iterable[Suit] = (),
        ranks: Iterable[Rank] = (),
        jokers: bool = False,
    ) -> 'Deck':
        """
        返回去除指定牌之后的新牌组，原牌组不变.

        花色在suits中、点数在ranks中的普通牌都会被去除；
        jokers为True时同时去除所有王牌.

        Args:
            suits: 要去除的花色
            ranks: 要去除的点数
            jokers: 是否去除王牌

        Returns:
            Deck: 过滤后的新牌组，共用同一个随机数生成器
        """
        suit_set = set(suits)
        rank_set = set(ranks)

        def keep(card: Card) -> bool:
            if isinstance(card, JokerCard):
                return not jokers
            return card.suit not in suit_set and card.rank not in rank_set

        filtered = type(self).new_empty(rng=self._rng)
        filtered._cards = [card for card in self._cards if keep(card)]
        filtered._initial_cards = filtered._cards.copy()
        logger.debug(
            "Filtered deck from %d to %d cards", len(self._cards), len(filtered._cards)
        )
        return filtered

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        """从底部到顶部遍历牌组."""
        return iter(self._cards.copy())

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards remaining)"

    def __repr__(self) -> str:
        return f"Deck(size={len(self._cards)}, top={self.top()!r})"
