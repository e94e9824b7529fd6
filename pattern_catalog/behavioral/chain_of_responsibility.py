"""
责任链模式
请求沿处理者链传递，每个处理者要么处理请求，要么转交给下一个处理者
"""

import sys
from abc import ABC, abstractmethod
from typing import Iterable, Optional, TextIO

from pattern_catalog.services.log_service import LoggerMixin


DEFAULT_REQUESTS = ["Nut", "Banana", "Cup of coffee"]


class Handler(ABC):
    """
    处理者接口
    声明链的构建方法和请求处理方法
    """

    @abstractmethod
    def set_next(self, handler: 'Handler') -> 'Handler':
        pass

    @abstractmethod
    def handle(self, request: str) -> Optional[str]:
        pass


class AbstractHandler(LoggerMixin, Handler):
    """
    处理者基类
    实现默认的链式行为：转交给下一个处理者，没有下一个处理者时返回None

    链只保存对下一个处理者的引用，处理者实例的生命周期由调用方管理。
    """

    def __init__(self):
        self._next_handler: Optional[Handler] = None

    @property
    def next_handler(self) -> Optional[Handler]:
        """下一个处理者"""
        return self._next_handler

    def set_next(self, handler: Handler) -> Handler:
        """
        设置下一个处理者

        返回传入的处理者而不是自身，这样
        monkey.set_next(squirrel).set_next(dog) 会依次连接 monkey→squirrel→dog。

        Args:
            handler: 下一个处理者

        Returns:
            传入的处理者
        """
        self._next_handler = handler
        self.logger.debug(f"{type(self).__name__} -> {type(handler).__name__}")
        return handler

    def handle(self, request: str) -> Optional[str]:
        if self._next_handler is not None:
            return self._next_handler.handle(request)

        return None


class FoodHandler(AbstractHandler):
    """
    只接受一种食物的处理者

    子类设置 name 和 accepted_food。
    """

    name: str = ""
    accepted_food: str = ""

    def handle(self, request: str) -> Optional[str]:
        if request == self.accepted_food:
            self.logger.debug(f"{self.name} consumed {request!r}")
            return f"{self.name}: I'll eat the {request}."
        return super().handle(request)


class MonkeyHandler(FoodHandler):
    name = "Monkey"
    accepted_food = "Banana"


class SquirrelHandler(FoodHandler):
    name = "Squirrel"
    accepted_food = "Nut"


class DogHandler(FoodHandler):
    name = "Dog"
    accepted_food = "MeatBall"


def build_chain(*handlers: Handler) -> Handler:
    """
    按给定顺序连接处理者

    Args:
        *handlers: 处理者，至少一个

    Returns:
        链的第一个处理者
    """
    if not handlers:
        raise ValueError("build_chain() needs at least one handler")

    current = handlers[0]
    for handler in handlers[1:]:
        current = current.set_next(handler)
    return handlers[0]


def client_code(handler: Handler, requests: Iterable[str] = DEFAULT_REQUESTS,
                out: Optional[TextIO] = None) -> None:
    """
    客户端代码
    通常只与单个处理者交互，并不知道它是链的一部分

    Args:
        handler: 入口处理者
        requests: 依次发送的请求
        out: 输出流，默认为标准输出
    """
    out = out or sys.stdout
    for food in requests:
        out.write(f"Client: Who wants a {food}?\n")
        result = handler.handle(food)
        if result:
            out.write(f"  {result}\n")
        else:
            out.write(f"  {food} was left untouched.\n")


def run_chain_demo(out: Optional[TextIO] = None, requests: Iterable[str] = DEFAULT_REQUESTS,
                   show_subchain: bool = True) -> None:
    """
    责任链演示

    Args:
        out: 输出流
        requests: 请求列表
        show_subchain: 是否从第二个处理者开始再演示一次子链
    """
    out = out or sys.stdout
    requests = list(requests)

    monkey = MonkeyHandler()
    squirrel = SquirrelHandler()
    dog = DogHandler()
    monkey.set_next(squirrel).set_next(dog)

    # 客户端可以把请求发给链上的任意处理者
    out.write("Chain: Monkey > Squirrel > Dog\n\n")
    client_code(monkey, requests, out)

    if show_subchain:
        out.write("\n")
        out.write("Subchain: Squirrel > Dog\n\n")
        client_code(squirrel, requests, out)
