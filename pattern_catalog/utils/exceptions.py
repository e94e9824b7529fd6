"""
自定义异常类
定义项目中使用的各种异常
"""

from typing import Optional, Any


class PatternCatalogException(Exception):
    """
    基础异常类
    所有自定义异常的父类
    """

    def __init__(self, message: str = "", code: Optional[int] = None,
                 details: Optional[Any] = None):
        """
        初始化异常

        Args:
            message: 错误信息
            code: 错误代码
            details: 详细信息
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


# ==================== 演示相关异常 ====================

class DemoException(PatternCatalogException):
    """演示相关异常的基类"""
    pass


class DemoNotFoundError(DemoException):
    """演示未找到异常"""

    def __init__(self, demo_name: str):
        message = f"Demo not found: {demo_name}"
        super().__init__(message, code=2001)
        self.demo_name = demo_name


class DemoExecutionError(DemoException):
    """演示执行异常"""

    def __init__(self, demo_name: str, reason: str = ""):
        message = f"Demo '{demo_name}' failed"
        if reason:
            message += f": {reason}"
        super().__init__(message, code=2002)
        self.demo_name = demo_name


# ==================== 原型相关异常 ====================

class PrototypeNotFoundError(PatternCatalogException):
    """原型未注册异常"""

    def __init__(self, prototype_type: Any):
        message = f"No prototype registered for {prototype_type}"
        super().__init__(message, code=3001)
        self.prototype_type = prototype_type


# ==================== 单例相关异常 ====================

class SingletonException(PatternCatalogException):
    """单例相关异常的基类"""
    pass


class SingletonInstantiationError(SingletonException):
    """绕过访问器直接实例化单例"""

    def __init__(self, class_name: str):
        message = f"{class_name} cannot be instantiated directly, use {class_name}.get_instance()"
        super().__init__(message, code=4001)
        self.class_name = class_name


class SingletonCopyError(SingletonException):
    """复制单例"""

    def __init__(self, class_name: str):
        message = f"{class_name} instances cannot be copied"
        super().__init__(message, code=4002)
        self.class_name = class_name


# ==================== 配置相关异常 ====================

class ConfigException(PatternCatalogException):
    """配置相关异常的基类"""
    pass


class ConfigLoadError(ConfigException):
    """配置加载异常"""

    def __init__(self, config_path: str, reason: str = ""):
        message = f"Failed to load config file: {config_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message, code=5001)
        self.config_path = config_path


class ConfigSaveError(ConfigException):
    """配置保存异常"""

    def __init__(self, config_path: str, reason: str = ""):
        message = f"Failed to save config file: {config_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message, code=5002)
        self.config_path = config_path


class ConfigValidationError(ConfigException):
    """配置验证异常"""

    def __init__(self, field: str, value: Any, reason: str):
        message = f"Invalid config - {field}: {value} - {reason}"
        super().__init__(message, code=5003)
        self.field = field
        self.value = value


# ==================== 错误处理工具函数 ====================

def get_user_friendly_message(exception: Exception) -> str:
    """
    获取用户友好的错误信息

    Args:
        exception: 异常对象

    Returns:
        用户友好的错误信息
    """
    ERROR_MESSAGES = {
        DemoNotFoundError: "Unknown pattern, run with --list to see the available demos",
        DemoExecutionError: "The demo failed, see the log for details",
        SingletonInstantiationError: "Singletons must be obtained through get_instance()",
        SingletonCopyError: "Singletons cannot be copied",
        ConfigLoadError: "Could not load the config file, check its format",
        ConfigValidationError: "The config contains invalid values",
    }

    for exc_type, message in ERROR_MESSAGES.items():
        if isinstance(exception, exc_type):
            return message

    # 自定义异常但没有特定消息时使用异常自身的消息
    if isinstance(exception, PatternCatalogException):
        return str(exception)

    return f"Unexpected error: {str(exception)}"
