"""
抽象工厂模式
创建一系列相关的产品，而无需指定其具体类
"""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO


class AbstractProductA(ABC):
    """产品A的基础接口，所有变体都要实现"""

    @abstractmethod
    def useful_function_a(self) -> str:
        pass


class ConcreteProductA1(AbstractProductA):
    def useful_function_a(self) -> str:
        return "The result of the product A1."


class ConcreteProductA2(AbstractProductA):
    def useful_function_a(self) -> str:
        return "The result of the product A2."


class AbstractProductB(ABC):
    """
    产品B的基础接口
    产品B既能独立工作，也能与同一变体的产品A协作
    """

    @abstractmethod
    def useful_function_b(self) -> str:
        pass

    @abstractmethod
    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        """
        与产品A协作

        接受任意产品A，但只有同一变体的产品才能正确协作。

        Args:
            collaborator: 协作的产品A
        """
        pass


class ConcreteProductB1(AbstractProductB):
    def useful_function_b(self) -> str:
        return "The result of the product B1."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        result = collaborator.useful_function_a()
        return f"The result of the B1 collaborating with ( {result} )"


class ConcreteProductB2(AbstractProductB):
    def useful_function_b(self) -> str:
        return "The result of the product B2."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        result = collaborator.useful_function_a()
        return f"The result of the B2 collaborating with ( {result} )"


class AbstractFactory(ABC):
    """
    抽象工厂接口
    声明返回各个抽象产品的方法，这些产品构成一个产品族
    """

    @abstractmethod
    def create_product_a(self) -> AbstractProductA:
        pass

    @abstractmethod
    def create_product_b(self) -> AbstractProductB:
        pass


class ConcreteFactory1(AbstractFactory):
    """生产变体1的产品族"""

    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA1()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB1()


class ConcreteFactory2(AbstractFactory):
    """生产变体2的产品族"""

    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA2()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB2()


def client_code(factory: AbstractFactory, out: Optional[TextIO] = None) -> None:
    """客户端只通过抽象类型使用工厂和产品"""
    out = out or sys.stdout
    product_a = factory.create_product_a()
    product_b = factory.create_product_b()

    out.write(f"{product_b.useful_function_b()}\n")
    out.write(f"{product_b.another_useful_function_b(product_a)}\n")


def run_abstract_factory_demo(out: Optional[TextIO] = None) -> None:
    """抽象工厂演示"""
    out = out or sys.stdout
    out.write("Client: Testing client code with the first factory type:\n")
    client_code(ConcreteFactory1(), out)
    out.write("\n")

    out.write("Client: Testing the same client code with the second factory type:\n")
    client_code(ConcreteFactory2(), out)
