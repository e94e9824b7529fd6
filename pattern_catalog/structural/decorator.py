"""
装饰器模式
把对象放进包装对象中，动态地为其添加行为
"""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO


class Component(ABC):
    """组件接口，定义可被装饰器修改的行为"""

    @abstractmethod
    def operation(self) -> str:
        pass


class ConcreteComponent(Component):
    def operation(self) -> str:
        return "ConcreteComponent"


class Decorator(Component):
    """
    装饰器基类
    保存被包装的组件，默认把所有工作委托给它
    """

    def __init__(self, component: Component):
        self._component = component

    @property
    def component(self) -> Component:
        return self._component

    def operation(self) -> str:
        return self._component.operation()


class ConcreteDecoratorA(Decorator):
    def operation(self) -> str:
        return f"ConcreteDecoratorA({super().operation()})"


class ConcreteDecoratorB(Decorator):
    def operation(self) -> str:
        return f"ConcreteDecoratorB({super().operation()})"


def client_code(component: Component, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    out.write(f"RESULT: {component.operation()}")


def run_decorator_demo(out: Optional[TextIO] = None) -> None:
    """装饰器演示"""
    out = out or sys.stdout
    simple = ConcreteComponent()
    out.write("Client: I've got a simple component:\n")
    client_code(simple, out)
    out.write("\n\n")

    # 装饰器既能包装简单组件，也能包装其他装饰器
    decorator1 = ConcreteDecoratorA(simple)
    decorator2 = ConcreteDecoratorB(decorator1)
    out.write("Client: Now I've got a decorated component:\n")
    client_code(decorator2, out)
    out.write("\n")
