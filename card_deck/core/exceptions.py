"""
扑克牌库异常定义.

所有异常均继承自CardDeckError，同时继承对应的内置异常类型，
调用方既可以捕获库的基础异常，也可以按内置类型捕获.
"""


class CardDeckError(Exception):
    """扑克牌库基础异常类"""
    pass


class InvalidCardError(CardDeckError, ValueError):
    """无效卡牌异常（构造参数不一致、类型错误或无法解析）"""
    pass


class DeckConfigError(CardDeckError, ValueError):
    """牌组配置错误异常"""
    pass


class InsufficientCardsError(CardDeckError, IndexError):
    """牌组剩余牌数不足异常"""
    pass
