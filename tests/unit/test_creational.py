"""
生成器、抽象工厂、原型单元测试
"""

import io

import pytest

from pattern_catalog.creational.abstract_factory import (
    ConcreteFactory1, ConcreteFactory2, ConcreteProductA1, ConcreteProductB2,
    run_abstract_factory_demo
)
from pattern_catalog.creational.builder import (
    ConcreteBuilder1, Director, Product, run_builder_demo
)
from pattern_catalog.creational.prototype import (
    ConcretePrototype1, ConcretePrototype2, PrototypeFactory, PrototypeType,
    run_prototype_demo
)
from pattern_catalog.utils.exceptions import PrototypeNotFoundError


@pytest.fixture
def builder():
    return ConcreteBuilder1()


@pytest.fixture
def director(builder):
    return Director(builder)


class TestBuilder:
    """生成器测试"""

    def test_list_parts(self):
        """部件按顺序以逗号分隔"""
        assert Product(["PartA1", "PartC1"]).list_parts() == "Product parts: PartA1, PartC1"
        assert Product().list_parts() == "Product parts: "

    def test_minimal_product(self, director, builder):
        """最小产品只有部件A"""
        director.build_minimal_viable_product()
        assert builder.get_product().parts == ["PartA1"]

    def test_full_featured_product(self, director, builder):
        """完整产品包含全部部件"""
        director.build_full_featured_product()
        assert builder.get_product().parts == ["PartA1", "PartB1", "PartC1"]

    def test_get_product_resets(self, builder):
        """取出产品后生成器重新开始"""
        builder.produce_part_b()
        first = builder.get_product()
        second = builder.get_product()
        assert first.parts == ["PartB1"]
        assert second.parts == []
        assert first is not second

    def test_director_without_builder(self):
        """主管没有生成器时报错"""
        with pytest.raises(ValueError):
            Director().build_full_featured_product()

    def test_director_builder_property(self, builder):
        """可以更换主管的生成器"""
        director = Director()
        director.builder = builder
        assert director.builder is builder

    def test_demo_transcript(self):
        """演示输出"""
        out = io.StringIO()
        run_builder_demo(out)
        assert out.getvalue() == (
            "Standard basic product:\n"
            "Product parts: PartA1\n\n"
            "Standard full featured product:\n"
            "Product parts: PartA1, PartB1, PartC1\n\n"
            "Custom product:\n"
            "Product parts: PartA1, PartC1\n\n"
        )


class TestAbstractFactory:
    """抽象工厂测试"""

    def test_factory_families(self):
        """每个工厂生产同一变体的产品"""
        product_a = ConcreteFactory1().create_product_a()
        product_b = ConcreteFactory2().create_product_b()
        assert isinstance(product_a, ConcreteProductA1)
        assert isinstance(product_b, ConcreteProductB2)

    @pytest.mark.parametrize("factory, variant", [
        (ConcreteFactory1(), "1"),
        (ConcreteFactory2(), "2"),
    ])
    def test_products_collaborate(self, factory, variant):
        """同一工厂的产品可以协作"""
        product_a = factory.create_product_a()
        product_b = factory.create_product_b()
        assert product_b.useful_function_b() == f"The result of the product B{variant}."
        assert product_b.another_useful_function_b(product_a) == (
            f"The result of the B{variant} collaborating with "
            f"( The result of the product A{variant}. )"
        )

    def test_demo_transcript(self):
        """演示输出"""
        out = io.StringIO()
        run_abstract_factory_demo(out)
        assert out.getvalue() == (
            "Client: Testing client code with the first factory type:\n"
            "The result of the product B1.\n"
            "The result of the B1 collaborating with ( The result of the product A1. )\n"
            "\n"
            "Client: Testing the same client code with the second factory type:\n"
            "The result of the product B2.\n"
            "The result of the B2 collaborating with ( The result of the product A2. )\n"
        )


class TestPrototype:
    """原型测试"""

    def test_create_returns_clone(self):
        """每次创建都得到新的副本"""
        factory = PrototypeFactory()
        first = factory.create_prototype(PrototypeType.PROTOTYPE_1)
        second = factory.create_prototype(PrototypeType.PROTOTYPE_1)
        assert isinstance(first, ConcretePrototype1)
        assert first is not second
        assert first.concrete_prototype_field1 == 50.0
        assert first.prototype_name == "PROTOTYPE_1 "

    def test_clone_is_independent(self):
        """修改副本不影响原型"""
        factory = PrototypeFactory()
        clone = factory.create_prototype(PrototypeType.PROTOTYPE_2)
        clone.method(10)
        assert isinstance(clone, ConcretePrototype2)
        assert clone.prototype_field == 10
        assert factory.create_prototype(PrototypeType.PROTOTYPE_2).prototype_field == 0.0

    def test_method_message(self):
        """method输出说明"""
        prototype = ConcretePrototype1("PROTOTYPE_1 ", 50.0)
        assert prototype.method(90) == "Call Method from PROTOTYPE_1  with field : 90"
        assert prototype.method(2.5) == "Call Method from PROTOTYPE_1  with field : 2.5"

    def test_unknown_type(self):
        """未注册的类型"""
        factory = PrototypeFactory()
        factory._prototypes.pop(PrototypeType.PROTOTYPE_2)
        with pytest.raises(PrototypeNotFoundError):
            factory.create_prototype(PrototypeType.PROTOTYPE_2)

    def test_register(self):
        """注册新的原型"""
        factory = PrototypeFactory()
        custom = ConcretePrototype2("CUSTOM", 1.0)
        factory.register(PrototypeType.PROTOTYPE_1, custom)
        clone = factory.create_prototype(PrototypeType.PROTOTYPE_1)
        assert clone.prototype_name == "CUSTOM"
        assert clone is not custom

    def test_demo_transcript(self):
        """演示输出"""
        out = io.StringIO()
        run_prototype_demo(out)
        assert out.getvalue() == (
            "Let's create a Prototype 1\n"
            "Call Method from PROTOTYPE_1  with field : 90\n"
            "\n"
            "Let's create a Prototype 2 \n"
            "Call Method from PROTOTYPE_2  with field : 10\n"
        )
