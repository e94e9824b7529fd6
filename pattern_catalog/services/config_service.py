"""
配置服务模块
提供配置的加载、保存、验证和管理功能
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional, Any, Union

import yaml

from pattern_catalog.models.config import AppConfig
from pattern_catalog.services.log_service import LoggerMixin
from pattern_catalog.utils.exceptions import ConfigLoadError, ConfigSaveError, ConfigValidationError
from pattern_catalog.utils.singleton import SingletonMeta


class ConfigService(LoggerMixin, metaclass=SingletonMeta):
    """
    配置服务类
    管理演示程序配置的加载、保存和验证

    进程内唯一，通过 ConfigService.get_instance() 获取。
    """

    DEFAULT_CONFIG_NAME = "pattern_catalog.yaml"
    SUPPORTED_SUFFIXES = ('.yaml', '.yml', '.json')

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        初始化配置服务

        Args:
            config_file: 配置文件路径，默认为当前目录下的 pattern_catalog.yaml
        """
        if config_file is None:
            self.config_file = Path.cwd() / self.DEFAULT_CONFIG_NAME
        else:
            self.config_file = Path(config_file)

        self._config: Optional[AppConfig] = None

        self.logger.debug(f"ConfigService initialized with config file: {self.config_file}")

    @property
    def config(self) -> AppConfig:
        """
        获取当前配置，第一次访问时加载

        Returns:
            当前配置对象
        """
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @config.setter
    def config(self, value: AppConfig) -> None:
        self._config = value

    def load_config(self, config_file: Optional[Union[str, Path]] = None) -> AppConfig:
        """
        加载配置文件

        文件不存在时返回默认配置，不会创建文件。

        Args:
            config_file: 配置文件路径，默认使用服务的配置文件

        Returns:
            配置对象
        """
        config_file = self.config_file if config_file is None else Path(config_file)

        if not config_file.exists():
            self.logger.info(f"Config file not found, using defaults: {config_file}")
            config = AppConfig.get_default()
            self._config = config
            return config

        if config_file.suffix in ['.yaml', '.yml']:
            config = self._load_yaml_config(config_file)
        elif config_file.suffix == '.json':
            config = self._load_json_config(config_file)
        else:
            raise ConfigLoadError(
                str(config_file),
                f"Unsupported config file format: {config_file.suffix}"
            )

        try:
            config.validate()
        except (ValueError, TypeError) as e:
            self.logger.error(f"Config validation error: {e}")
            raise ConfigValidationError("config", str(config_file), str(e))

        self.logger.info(f"Config loaded successfully from: {config_file}")
        self._config = config
        return config

    def _load_yaml_config(self, config_file: Path) -> AppConfig:
        """
        加载YAML配置文件

        Args:
            config_file: YAML文件路径

        Returns:
            配置对象
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigLoadError(str(config_file), f"YAML parse error: {e}")
        except OSError as e:
            raise ConfigLoadError(str(config_file), f"Failed to read YAML: {e}")

        return self._build_config(config_file, data)

    def _load_json_config(self, config_file: Path) -> AppConfig:
        """
        加载JSON配置文件

        Args:
            config_file: JSON文件路径

        Returns:
            配置对象
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigLoadError(str(config_file), f"JSON parse error: {e}")
        except OSError as e:
            raise ConfigLoadError(str(config_file), f"Failed to read JSON: {e}")

        return self._build_config(config_file, data)

    def _build_config(self, config_file: Path, data: Any) -> AppConfig:
        """把解析出的数据转换为配置对象，空文件得到默认配置"""
        if not data:
            return AppConfig.get_default()

        if not isinstance(data, dict):
            raise ConfigLoadError(str(config_file), "Top level of the config must be a mapping")

        try:
            return AppConfig.from_dict(data)
        except TypeError as e:
            # 未知字段
            raise ConfigLoadError(str(config_file), f"Unknown config field: {e}")

    def save_config(self, config: Optional[AppConfig] = None,
                    config_file: Optional[Union[str, Path]] = None) -> Path:
        """
        保存配置到文件

        Args:
            config: 要保存的配置对象，默认使用当前配置
            config_file: 配置文件路径，默认使用服务的配置文件

        Returns:
            实际写入的文件路径
        """
        if config is None:
            config = self._config or AppConfig.get_default()

        config_file = self.config_file if config_file is None else Path(config_file)

        if not self.validate_config(config):
            raise ConfigSaveError(str(config_file), "Config validation failed")

        # 不支持的扩展名默认使用YAML格式
        if config_file.suffix not in self.SUPPORTED_SUFFIXES:
            config_file = config_file.with_suffix('.yaml')

        data = config.to_dict()
        data['_metadata'] = {
            'version': config.config_version,
            'saved_at': datetime.now().isoformat(),
            'saved_by': 'PatternCatalog'
        }

        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(config_file, 'w', encoding='utf-8') as f:
                if config_file.suffix == '.json':
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    yaml.dump(data, f, default_flow_style=False,
                              allow_unicode=True, sort_keys=False)
        except (OSError, yaml.YAMLError) as e:
            self.logger.error(f"Failed to save config: {e}")
            raise ConfigSaveError(str(config_file), str(e))

        self.logger.info(f"Config saved successfully to: {config_file}")
        return config_file

    def validate_config(self, config: AppConfig) -> bool:
        """
        验证配置的有效性

        Args:
            config: 要验证的配置对象

        Returns:
            是否有效
        """
        try:
            return config.validate()
        except (ValueError, TypeError) as e:
            self.logger.error(f"Config validation error: {e}")
            return False

    def get_config_value(self, key_path: str, default: Any = None) -> Any:
        """
        获取配置值（支持点分路径）

        Args:
            key_path: 配置键路径，如 "singleton.thread_delay"
            default: 默认值

        Returns:
            配置值
        """
        value = self.config
        for key in key_path.split('.'):
            if hasattr(value, key):
                value = getattr(value, key)
            else:
                return default
        return value

    def set_config_value(self, key_path: str, value: Any) -> bool:
        """
        设置配置值（支持点分路径）

        Args:
            key_path: 配置键路径，如 "singleton.thread_delay"
            value: 配置值

        Returns:
            是否设置成功
        """
        keys = key_path.split('.')

        # 导航到父对象
        obj = self.config
        for key in keys[:-1]:
            if not hasattr(obj, key):
                self.logger.error(f"Config path not found: {key_path}")
                return False
            obj = getattr(obj, key)

        last_key = keys[-1]
        if not hasattr(obj, last_key):
            self.logger.error(f"Config key not found: {last_key}")
            return False

        old_value = getattr(obj, last_key)
        setattr(obj, last_key, value)

        if not self.validate_config(self.config):
            setattr(obj, last_key, old_value)
            return False

        return True

    def reset_to_default(self) -> AppConfig:
        """
        重置为默认配置

        Returns:
            默认配置对象
        """
        self.logger.info("Resetting config to default")
        self._config = AppConfig.get_default()
        return self._config
