"""
结构型模式
"""

from .adapter import Adapter, Adaptee, Target
from .decorator import Component, ConcreteComponent, ConcreteDecoratorA, ConcreteDecoratorB
from .facade import Facade, Subsystem1, Subsystem2

__all__ = [
    'Adapter', 'Adaptee', 'Target',
    'Component', 'ConcreteComponent', 'ConcreteDecoratorA', 'ConcreteDecoratorB',
    'Facade', 'Subsystem1', 'Subsystem2'
]
