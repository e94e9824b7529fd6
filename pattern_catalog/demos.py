"""
演示注册表
管理各个设计模式的演示程序
"""

import sys
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, TextIO

from pattern_catalog.behavioral.chain_of_responsibility import run_chain_demo
from pattern_catalog.creational.abstract_factory import run_abstract_factory_demo
from pattern_catalog.creational.builder import run_builder_demo
from pattern_catalog.creational.prototype import run_prototype_demo
from pattern_catalog.creational.singleton import run_singleton_demo
from pattern_catalog.models.config import AppConfig
from pattern_catalog.services.log_service import LoggerMixin
from pattern_catalog.structural.adapter import run_adapter_demo
from pattern_catalog.structural.decorator import run_decorator_demo
from pattern_catalog.structural.facade import run_facade_demo
from pattern_catalog.utils.exceptions import (
    DemoExecutionError, DemoNotFoundError, PatternCatalogException
)


@dataclass
class Demo:
    """
    演示定义

    Attributes:
        name: 演示名称，命令行中使用
        category: 模式分类 (behavioral/creational/structural)
        description: 简短说明
        runner: 接收(输出流, 配置)并打印演示内容的函数
    """
    name: str
    category: str
    description: str
    runner: Callable[[TextIO, AppConfig], None]


class DemoRegistry(LoggerMixin):
    """
    演示注册表
    按注册顺序保存演示程序
    """

    def __init__(self, register_builtin: bool = True):
        """
        初始化演示注册表

        Args:
            register_builtin: 是否注册内置演示
        """
        self._demos: Dict[str, Demo] = {}
        if register_builtin:
            self._init_builtin_demos()

    def _init_builtin_demos(self) -> None:
        """注册内置演示"""
        self.register(Demo(
            name="chain_of_responsibility",
            category="behavioral",
            description="Requests travel along a chain of handlers until one accepts",
            runner=lambda out, config: run_chain_demo(
                out, config.chain.requests, config.chain.show_subchain
            )
        ))
        self.register(Demo(
            name="singleton",
            category="creational",
            description="Threads racing for a lazily created single instance",
            runner=lambda out, config: run_singleton_demo(
                out, config.singleton.seeds, config.singleton.thread_delay
            )
        ))
        self.register(Demo(
            name="builder",
            category="creational",
            description="A director assembling products step by step",
            runner=lambda out, config: run_builder_demo(out)
        ))
        self.register(Demo(
            name="abstract_factory",
            category="creational",
            description="Factories producing families of compatible products",
            runner=lambda out, config: run_abstract_factory_demo(out)
        ))
        self.register(Demo(
            name="prototype",
            category="creational",
            description="Creating objects by cloning registered prototypes",
            runner=lambda out, config: run_prototype_demo(
                out, config.prototype.first_field, config.prototype.second_field
            )
        ))
        self.register(Demo(
            name="adapter",
            category="structural",
            description="Translating an incompatible interface for the client",
            runner=lambda out, config: run_adapter_demo(out)
        ))
        self.register(Demo(
            name="decorator",
            category="structural",
            description="Wrapping components to extend their behavior",
            runner=lambda out, config: run_decorator_demo(out)
        ))
        self.register(Demo(
            name="facade",
            category="structural",
            description="One simple entry point over several subsystems",
            runner=lambda out, config: run_facade_demo(out)
        ))

    def register(self, demo: Demo) -> None:
        """
        注册演示，同名演示会被替换

        Args:
            demo: 演示定义
        """
        self._demos[demo.name] = demo

    def get_demo(self, name: str) -> Demo:
        """
        获取演示

        Args:
            name: 演示名称

        Returns:
            演示定义
        """
        demo = self._demos.get(name)
        if demo is None:
            raise DemoNotFoundError(name)
        return demo

    def list_demos(self) -> List[Demo]:
        return list(self._demos.values())

    def run(self, name: str, out: Optional[TextIO] = None,
            config: Optional[AppConfig] = None) -> None:
        """
        运行一个演示

        Args:
            name: 演示名称
            out: 输出流，默认为标准输出
            config: 演示配置，默认使用默认配置
        """
        demo = self.get_demo(name)
        out = out or sys.stdout
        config = config or AppConfig.get_default()

        self.logger.info(f"Running demo: {name}")
        try:
            demo.runner(out, config)
        except PatternCatalogException:
            raise
        except Exception as e:
            self.logger.error(f"Demo {name} failed: {e}", exc_info=True)
            raise DemoExecutionError(name, str(e)) from e

    def run_all(self, out: Optional[TextIO] = None,
                config: Optional[AppConfig] = None) -> None:
        """按注册顺序运行所有演示，每个演示前输出标题"""
        out = out or sys.stdout
        for index, demo in enumerate(self.list_demos()):
            if index:
                out.write("\n")
            out.write(f"===== {demo.name} ({demo.category}) =====\n")
            self.run(demo.name, out, config)
