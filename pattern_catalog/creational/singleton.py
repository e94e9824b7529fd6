"""
单例模式
进程内唯一的值容器，第一次访问时创建，多线程并发首次访问也只会创建一次
"""

import sys
import threading
import time
from typing import Any, Iterable, Optional, TextIO

from pattern_catalog.services.log_service import LoggerMixin
from pattern_catalog.utils.exceptions import SingletonCopyError
from pattern_catalog.utils.singleton import SingletonMeta


class Singleton(LoggerMixin, metaclass=SingletonMeta):
    """
    单例值容器

    只能通过 Singleton.get_instance(value) 获取。第一次调用时保存 value，
    之后无论传入什么值都返回同一个实例，value 保持第一次的值。
    """

    def __init__(self, value: Any):
        self._value = value
        self.logger.info(f"Singleton created with value {value!r}")

    @property
    def value(self) -> Any:
        """构造时保存的值"""
        return self._value

    def some_business_logic(self) -> None:
        """单例上的业务逻辑"""
        pass

    # 单例不可复制

    def __copy__(self):
        raise SingletonCopyError(type(self).__name__)

    def __deepcopy__(self, memo):
        raise SingletonCopyError(type(self).__name__)

    def __reduce__(self):
        raise SingletonCopyError(type(self).__name__)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self._value!r})"


def _print_singleton_value(seed: str, delay: float, out: TextIO,
                           write_lock: threading.Lock) -> None:
    """线程函数：等待后以 seed 访问单例并输出其值"""
    time.sleep(delay)
    singleton = Singleton.get_instance(seed)
    with write_lock:
        out.write(f"{singleton.value}\n")


def run_singleton_demo(out: Optional[TextIO] = None,
                       seeds: Iterable[str] = ("FOO", "BAR"),
                       delay: float = 1.0) -> None:
    """
    单例演示
    每个 seed 一个线程，等待相同的时间后同时访问单例

    Args:
        out: 输出流
        seeds: 每个线程传给访问器的值
        delay: 线程访问前的等待时间（秒）
    """
    out = out or sys.stdout
    out.write("If you see the same value, then singleton was reused (yay!\n"
              "If you see different values, then 2 singletons were created (booo!!)\n\n"
              "RESULT:\n")

    write_lock = threading.Lock()
    threads = [
        threading.Thread(
            target=_print_singleton_value,
            args=(seed, delay, out, write_lock),
            name=f"singleton-{seed}"
        )
        for seed in seeds
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
