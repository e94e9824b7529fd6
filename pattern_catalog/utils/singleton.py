"""
单例模式实现
提供线程安全的单例元类
"""

from typing import Any, Dict, Type
import threading

from pattern_catalog.utils.exceptions import SingletonInstantiationError


class SingletonMeta(type):
    """
    单例元类
    确保一个类只有一个实例，且只能通过 get_instance() 获取

    直接调用类（如 Config()）会抛出 SingletonInstantiationError。
    第一次调用 get_instance() 时用传入的参数创建实例，之后的调用忽略参数，
    始终返回同一个实例。构造函数抛出异常时不保存任何实例，下一次调用会重新构造。
    """

    _instances: Dict[Type, Any] = {}
    # 可重入锁：一个单例的构造函数里可以获取另一个单例
    _lock: threading.RLock = threading.RLock()

    def __call__(cls, *args, **kwargs):
        raise SingletonInstantiationError(cls.__name__)

    def get_instance(cls, *args, **kwargs):
        """
        获取类的唯一实例，必要时创建

        Returns:
            类的唯一实例
        """
        # 双重检查锁定模式
        instance = SingletonMeta._instances.get(cls)
        if instance is None:
            with SingletonMeta._lock:
                instance = SingletonMeta._instances.get(cls)
                if instance is None:
                    instance = super().__call__(*args, **kwargs)
                    SingletonMeta._instances[cls] = instance
        return instance

    def has_instance(cls) -> bool:
        """实例是否已经创建"""
        return cls in SingletonMeta._instances

    def _reset_instance(cls) -> None:
        """丢弃已创建的实例，仅供测试使用"""
        with SingletonMeta._lock:
            SingletonMeta._instances.pop(cls, None)
