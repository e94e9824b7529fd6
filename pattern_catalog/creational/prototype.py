"""
原型模式
通过复制已有对象来创建新对象，无需依赖其具体类
"""

import copy
import sys
from abc import ABC
from enum import Enum
from typing import Dict, Optional, TextIO

from pattern_catalog.services.log_service import LoggerMixin
from pattern_catalog.utils.exceptions import PrototypeNotFoundError


class PrototypeType(Enum):
    """原型类型枚举"""
    PROTOTYPE_1 = 0
    PROTOTYPE_2 = 1


class Prototype(ABC):
    """
    可克隆对象的基类

    Attributes:
        prototype_name: 原型名称
        prototype_field: 由 method() 设置的字段
    """

    def __init__(self, prototype_name: str):
        self.prototype_name = prototype_name
        self.prototype_field = 0.0

    def clone(self) -> 'Prototype':
        """
        深拷贝当前对象

        Returns:
            与当前对象类型相同的新实例
        """
        return copy.deepcopy(self)

    def method(self, prototype_field: float) -> str:
        """
        设置字段并返回说明信息

        Args:
            prototype_field: 新的字段值

        Returns:
            调用说明
        """
        self.prototype_field = prototype_field
        return f"Call Method from {self.prototype_name} with field : {prototype_field:g}"


class ConcretePrototype1(Prototype):
    def __init__(self, prototype_name: str, concrete_prototype_field: float):
        super().__init__(prototype_name)
        self.concrete_prototype_field1 = concrete_prototype_field


class ConcretePrototype2(Prototype):
    def __init__(self, prototype_name: str, concrete_prototype_field: float):
        super().__init__(prototype_name)
        self.concrete_prototype_field2 = concrete_prototype_field


class PrototypeFactory(LoggerMixin):
    """
    原型工厂
    每种类型保存一个原型，创建对象时克隆对应的原型
    """

    def __init__(self):
        self._prototypes: Dict[PrototypeType, Prototype] = {
            PrototypeType.PROTOTYPE_1: ConcretePrototype1("PROTOTYPE_1 ", 50.0),
            PrototypeType.PROTOTYPE_2: ConcretePrototype2("PROTOTYPE_2 ", 60.0),
        }

    def register(self, prototype_type: PrototypeType, prototype: Prototype) -> None:
        """注册或替换某个类型的原型"""
        self._prototypes[prototype_type] = prototype

    def create_prototype(self, prototype_type: PrototypeType) -> Prototype:
        """
        克隆指定类型的原型

        Args:
            prototype_type: 原型类型

        Returns:
            新的原型副本
        """
        prototype = self._prototypes.get(prototype_type)
        if prototype is None:
            raise PrototypeNotFoundError(prototype_type)

        self.logger.debug(f"Cloning {prototype_type.name}")
        return prototype.clone()


def run_prototype_demo(out: Optional[TextIO] = None,
                       first_field: float = 90, second_field: float = 10) -> None:
    """原型演示"""
    out = out or sys.stdout
    factory = PrototypeFactory()

    out.write("Let's create a Prototype 1\n")
    prototype = factory.create_prototype(PrototypeType.PROTOTYPE_1)
    out.write(prototype.method(first_field) + "\n")
    out.write("\n")

    out.write("Let's create a Prototype 2 \n")
    prototype = factory.create_prototype(PrototypeType.PROTOTYPE_2)
    out.write(prototype.method(second_field) + "\n")
