"""
设计模式演示集
经典面向对象设计模式的控制台演示
"""

__version__ = "1.0.0"
