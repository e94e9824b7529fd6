"""
生成器模式
分步骤构建复杂产品，同样的构建过程可以得到不同的产品
"""

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from pattern_catalog.services.log_service import LoggerMixin


@dataclass
class Product:
    """由生成器组装的产品"""
    parts: List[str] = field(default_factory=list)

    def list_parts(self) -> str:
        return "Product parts: " + ", ".join(self.parts)


class Builder(ABC):
    """
    生成器接口
    声明产品各部件的创建步骤
    """

    @abstractmethod
    def produce_part_a(self) -> None:
        pass

    @abstractmethod
    def produce_part_b(self) -> None:
        pass

    @abstractmethod
    def produce_part_c(self) -> None:
        pass


class ConcreteBuilder1(LoggerMixin, Builder):
    """
    具体生成器
    所有步骤都作用于同一个产品实例，取出产品后自动开始新的产品
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._product = Product()

    def produce_part_a(self) -> None:
        self._product.parts.append("PartA1")

    def produce_part_b(self) -> None:
        self._product.parts.append("PartB1")

    def produce_part_c(self) -> None:
        self._product.parts.append("PartC1")

    def get_product(self) -> Product:
        """
        取出当前产品并重置生成器

        Returns:
            组装好的产品
        """
        product = self._product
        self.reset()
        self.logger.debug(f"Built product with {len(product.parts)} part(s)")
        return product


class Director:
    """
    主管
    只负责按特定顺序执行构建步骤，客户端也可以不通过主管直接使用生成器
    """

    def __init__(self, builder: Optional[Builder] = None):
        self._builder = builder

    @property
    def builder(self) -> Optional[Builder]:
        return self._builder

    @builder.setter
    def builder(self, builder: Builder) -> None:
        self._builder = builder

    def _require_builder(self) -> Builder:
        if self._builder is None:
            raise ValueError("Director has no builder assigned")
        return self._builder

    def build_minimal_viable_product(self) -> None:
        self._require_builder().produce_part_a()

    def build_full_featured_product(self) -> None:
        builder = self._require_builder()
        builder.produce_part_a()
        builder.produce_part_b()
        builder.produce_part_c()


def run_builder_demo(out: Optional[TextIO] = None) -> None:
    """生成器演示"""
    out = out or sys.stdout
    director = Director()
    builder = ConcreteBuilder1()
    director.builder = builder

    out.write("Standard basic product:\n")
    director.build_minimal_viable_product()
    out.write(builder.get_product().list_parts() + "\n\n")

    out.write("Standard full featured product:\n")
    director.build_full_featured_product()
    out.write(builder.get_product().list_parts() + "\n\n")

    # 不通过主管也可以使用生成器
    out.write("Custom product:\n")
    builder.produce_part_a()
    builder.produce_part_c()
    out.write(builder.get_product().list_parts() + "\n\n")
