"""
行为型模式
"""

from .chain_of_responsibility import (
    Handler, AbstractHandler, FoodHandler,
    MonkeyHandler, SquirrelHandler, DogHandler, build_chain
)

__all__ = [
    'Handler',
    'AbstractHandler',
    'FoodHandler',
    'MonkeyHandler',
    'SquirrelHandler',
    'DogHandler',
    'build_chain'
]
