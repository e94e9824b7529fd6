"""
配置数据模型
定义演示程序的配置数据结构
"""

from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any, List


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _is_number(value: Any) -> bool:
    # bool是int的子类，这里不算数字
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


@dataclass
class ChainConfig:
    """
    责任链演示配置

    Attributes:
        requests: 依次发送给链的请求
        show_subchain: 是否从第二个处理者开始再演示一次
    """
    requests: List[str] = field(default_factory=lambda: ["Nut", "Banana", "Cup of coffee"])
    show_subchain: bool = True

    def validate(self) -> bool:
        """验证配置的有效性"""
        if not _is_string_list(self.requests):
            raise ValueError("chain.requests must be a list of strings")
        if not isinstance(self.show_subchain, bool):
            raise ValueError("chain.show_subchain must be true or false")
        return True


@dataclass
class SingletonConfig:
    """
    单例演示配置

    Attributes:
        thread_delay: 线程访问单例前的等待时间（秒）
        seeds: 每个线程传给访问器的值
    """
    thread_delay: float = 1.0
    seeds: List[str] = field(default_factory=lambda: ["FOO", "BAR"])

    def validate(self) -> bool:
        """验证配置的有效性"""
        if not _is_number(self.thread_delay):
            raise ValueError("singleton.thread_delay must be a number")
        if self.thread_delay < 0:
            raise ValueError("singleton.thread_delay must not be negative")
        if not isinstance(self.seeds, list):
            raise ValueError("singleton.seeds must be a list")
        if not self.seeds:
            raise ValueError("singleton.seeds needs at least one value")
        return True


@dataclass
class PrototypeConfig:
    """
    原型演示配置

    Attributes:
        first_field: 第一个克隆对象设置的字段值
        second_field: 第二个克隆对象设置的字段值
    """
    first_field: float = 90
    second_field: float = 10

    def validate(self) -> bool:
        """验证配置的有效性"""
        if not _is_number(self.first_field):
            raise ValueError("prototype.first_field must be a number")
        if not _is_number(self.second_field):
            raise ValueError("prototype.second_field must be a number")
        return True


@dataclass
class AppConfig:
    """
    应用配置主类

    Attributes:
        chain: 责任链演示配置
        singleton: 单例演示配置
        prototype: 原型演示配置
        log_level: 日志级别
        log_dir: 日志文件目录，为None时不写日志文件
        config_version: 配置版本
    """
    chain: ChainConfig = field(default_factory=ChainConfig)
    singleton: SingletonConfig = field(default_factory=SingletonConfig)
    prototype: PrototypeConfig = field(default_factory=PrototypeConfig)
    log_level: str = "WARNING"
    log_dir: Optional[str] = None
    config_version: str = "1.0.0"

    def validate(self) -> bool:
        """验证所有配置的有效性"""
        for name, section_type in (('chain', ChainConfig), ('singleton', SingletonConfig),
                                   ('prototype', PrototypeConfig)):
            if not isinstance(getattr(self, name), section_type):
                raise ValueError(f"{name} must be a mapping")

        self.chain.validate()
        self.singleton.validate()
        self.prototype.validate()

        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {'/'.join(LOG_LEVELS)}")
        if self.log_dir is not None and not isinstance(self.log_dir, str):
            raise ValueError("log_dir must be a path string")

        return True

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        """从字典创建配置实例"""
        # 复制数据以避免修改原始数据
        data = dict(data)

        # 移除元数据字段（不是配置的一部分）
        data.pop('_metadata', None)

        if 'chain' in data:
            data['chain'] = ChainConfig(**data['chain'])
        if 'singleton' in data:
            data['singleton'] = SingletonConfig(**data['singleton'])
        if 'prototype' in data:
            data['prototype'] = PrototypeConfig(**data['prototype'])

        return cls(**data)

    @classmethod
    def get_default(cls) -> 'AppConfig':
        """获取默认配置"""
        return cls()
