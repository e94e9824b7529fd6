"""
适配器、装饰器、外观单元测试
"""

import io

from pattern_catalog.structural.adapter import Adaptee, Adapter, Target, run_adapter_demo
from pattern_catalog.structural.decorator import (
    ConcreteComponent, ConcreteDecoratorA, ConcreteDecoratorB, Decorator, run_decorator_demo
)
from pattern_catalog.structural.facade import Facade, Subsystem1, Subsystem2, run_facade_demo


FACADE_OUTPUT = (
    "Facade initializes subsystems:\n"
    "Subsystem1: Ready!\n"
    "Subsystem2: Get ready!\n"
    "Facade orders subsystems to perform the action:\n"
    "Subsystem1: Go!\n"
    "Subsystem2: Fire!\n"
)


class TestAdapter:
    """适配器测试"""

    def test_target(self):
        assert Target().request() == "Target: The default target's behavior."

    def test_adapter_translates(self):
        """适配器把被适配者的结果翻转过来"""
        adapter = Adapter(Adaptee())
        assert isinstance(adapter, Target)
        assert adapter.request() == "Adapter: (TRANSLATED) Special behavior of the Adaptee."

    def test_demo_transcript(self):
        """演示输出"""
        out = io.StringIO()
        run_adapter_demo(out)
        assert out.getvalue() == (
            "Client: I can work just fine with the Target objects:\n"
            "Target: The default target's behavior.\n\n"
            "Client: The Adaptee class has a weird interface. See, I don't understand it:\n"
            "Adaptee: .eetpadA eht fo roivaheb laicepS\n\n"
            "Client: But I can work with it via the Adapter:\n"
            "Adapter: (TRANSLATED) Special behavior of the Adaptee.\n"
        )


class TestDecorator:
    """装饰器测试"""

    def test_base_decorator_delegates(self):
        """装饰器基类只做委托"""
        component = ConcreteComponent()
        decorator = Decorator(component)
        assert decorator.component is component
        assert decorator.operation() == "ConcreteComponent"

    def test_nested_decorators(self):
        """装饰器可以嵌套"""
        decorated = ConcreteDecoratorB(ConcreteDecoratorA(ConcreteComponent()))
        assert decorated.operation() == "ConcreteDecoratorB(ConcreteDecoratorA(ConcreteComponent))"

    def test_demo_transcript(self):
        """演示输出"""
        out = io.StringIO()
        run_decorator_demo(out)
        assert out.getvalue() == (
            "Client: I've got a simple component:\n"
            "RESULT: ConcreteComponent\n\n"
            "Client: Now I've got a decorated component:\n"
            "RESULT: ConcreteDecoratorB(ConcreteDecoratorA(ConcreteComponent))\n"
        )


class TestFacade:
    """外观测试"""

    def test_creates_missing_subsystems(self):
        """没有传入子系统时外观自己创建"""
        assert Facade().operation() == FACADE_OUTPUT

    def test_uses_given_subsystems(self):
        """使用客户端传入的子系统"""

        class LoudSubsystem1(Subsystem1):
            def operation_n(self) -> str:
                return "Subsystem1: GO!\n"

        output = Facade(LoudSubsystem1(), Subsystem2()).operation()
        assert "Subsystem1: GO!\n" in output
        assert "Subsystem1: Go!\n" not in output

    def test_demo_transcript(self):
        """演示输出"""
        out = io.StringIO()
        run_facade_demo(out)
        assert out.getvalue() == FACADE_OUTPUT
