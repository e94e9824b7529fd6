"""
适配器模式
让接口不兼容的对象能够协作
"""

import sys
from typing import Optional, TextIO


class Target:
    """目标接口，客户端代码只认识它"""

    def request(self) -> str:
        return "Target: The default target's behavior."


class Adaptee:
    """被适配者：行为有用，但接口与客户端不兼容"""

    def specific_request(self) -> str:
        return ".eetpadA eht fo roivaheb laicepS"


class Adapter(Target):
    """把被适配者的接口转换成目标接口"""

    def __init__(self, adaptee: Adaptee):
        self._adaptee = adaptee

    def request(self) -> str:
        return f"Adapter: (TRANSLATED) {self._adaptee.specific_request()[::-1]}"


def client_code(target: Target, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    out.write(target.request())


def run_adapter_demo(out: Optional[TextIO] = None) -> None:
    """适配器演示"""
    out = out or sys.stdout
    out.write("Client: I can work just fine with the Target objects:\n")
    client_code(Target(), out)
    out.write("\n\n")

    adaptee = Adaptee()
    out.write("Client: The Adaptee class has a weird interface. See, I don't understand it:\n")
    out.write(f"Adaptee: {adaptee.specific_request()}")
    out.write("\n\n")

    out.write("Client: But I can work with it via the Adapter:\n")
    client_code(Adapter(adaptee), out)
    out.write("\n")
