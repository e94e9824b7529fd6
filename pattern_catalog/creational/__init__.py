"""
创建型模式
"""

from .singleton import Singleton
from .builder import Builder, ConcreteBuilder1, Director, Product
from .abstract_factory import AbstractFactory, ConcreteFactory1, ConcreteFactory2
from .prototype import Prototype, PrototypeFactory, PrototypeType

__all__ = [
    'Singleton',
    'Builder',
    'ConcreteBuilder1',
    'Director',
    'Product',
    'AbstractFactory',
    'ConcreteFactory1',
    'ConcreteFactory2',
    'Prototype',
    'PrototypeFactory',
    'PrototypeType'
]
