"""
牌组配置和日志配置.

配置类均为普通dataclass，在__post_init__中完成校验.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .enums import STANDARD_RANKS, STANDARD_SUITS
from .exceptions import DeckConfigError

PACKAGE_LOGGER_NAME = "card_deck"
STANDARD_DECK_SIZE = len(STANDARD_SUITS) * len(STANDARD_RANKS)


@dataclass
class DeckConfig:
    """
    牌组配置类.

    Attributes:
        num_decks: 标准牌副数(每副52张)
        jokers_per_deck: 每副牌附带的王牌数量
        random_seed: 随机种子，用于可重现的洗牌结果
    """
    num_decks: int = 1
    jokers_per_deck: int = 0
    random_seed: Optional[int] = None

    def __post_init__(self):
        """验证配置的有效性"""
        for name in ("num_decks", "jokers_per_deck"):
            value = getattr(self, name)
            # bool是int的子类，需单独排除
            if isinstance(value, bool) or not isinstance(value, int):
                raise DeckConfigError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise DeckConfigError(f"{name} cannot be negative: {value}")

        if self.random_seed is not None and (
            isinstance(self.random_seed, bool) or not isinstance(self.random_seed, int)
        ):
            raise DeckConfigError(f"random_seed must be an integer or None, got {self.random_seed!r}")

    @property
    def deck_size(self) -> int:
        """按此配置构建的牌组总张数"""
        return (STANDARD_DECK_SIZE + self.jokers_per_deck) * self.num_decks


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    enable_console_logging: bool = True

    def __post_init__(self):
        if not isinstance(self.log_level, str):
            raise DeckConfigError(f"log_level must be a level name, got {self.log_level!r}")
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise DeckConfigError(f"unknown log level: {self.log_level}")
        self.log_level = self.log_level.upper()


class ConsoleHandler(logging.StreamHandler):
    """configure_logging添加的控制台处理器，用于在重复配置时识别并替换"""


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    按配置设置card_deck包的日志记录器.

    库在导入时不会配置日志，需要输出日志的应用在启动时调用一次即可.
    重复调用会替换之前由本函数添加的处理器.

    Args:
        config: 日志配置，为None时使用默认配置

    Returns:
        logging.Logger: card_deck包的根日志记录器
    """
    config = config or LoggingConfig()
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(config.log_level)

    for handler in list(logger.handlers):
        if isinstance(handler, ConsoleHandler):
            logger.removeHandler(handler)

    if config.enable_console_logging:
        handler = ConsoleHandler()
        handler.setFormatter(logging.Formatter(config.log_format))
        logger.addHandler(handler)

    return logger
