"""
外观模式
为复杂的子系统提供简单的接口
"""

import sys
from typing import Optional, TextIO


class Subsystem1:
    def operation1(self) -> str:
        return "Subsystem1: Ready!\n"

    def operation_n(self) -> str:
        return "Subsystem1: Go!\n"


class Subsystem2:
    def operation1(self) -> str:
        return "Subsystem2: Get ready!\n"

    def operation_z(self) -> str:
        return "Subsystem2: Fire!\n"


class Facade:
    """
    外观
    把客户端请求委托给子系统，并负责子系统的生命周期

    Args:
        subsystem1: 已有的子系统1，为None时由外观创建
        subsystem2: 已有的子系统2，为None时由外观创建
    """

    def __init__(self, subsystem1: Optional[Subsystem1] = None,
                 subsystem2: Optional[Subsystem2] = None):
        self._subsystem1 = subsystem1 or Subsystem1()
        self._subsystem2 = subsystem2 or Subsystem2()

    def operation(self) -> str:
        results = [
            "Facade initializes subsystems:\n",
            self._subsystem1.operation1(),
            self._subsystem2.operation1(),
            "Facade orders subsystems to perform the action:\n",
            self._subsystem1.operation_n(),
            self._subsystem2.operation_z(),
        ]
        return "".join(results)


def client_code(facade: Facade, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    out.write(facade.operation())


def run_facade_demo(out: Optional[TextIO] = None) -> None:
    """外观演示：客户端已有子系统对象时可以交给外观使用"""
    facade = Facade(Subsystem1(), Subsystem2())
    client_code(facade, out)
