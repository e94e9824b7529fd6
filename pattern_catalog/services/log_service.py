"""
日志服务模块
诊断日志写入stderr，演示输出走stdout，两者互不干扰
"""

import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional, Union
from logging.handlers import RotatingFileHandler


ROOT_LOGGER_NAME = 'PatternCatalog'

LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUPS = 3

FILE_FORMAT = '%(asctime)s %(levelname)-8s %(name)s [%(filename)s:%(lineno)d] %(message)s'
CONSOLE_FORMAT = '%(levelname)s %(name)s: %(message)s'


def _file_handler(path: Path, level: int) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS, encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    log_level: str = 'WARNING',
    log_dir: Optional[Union[str, Path]] = None,
    console_output: bool = True,
    file_output: bool = False
) -> logging.Logger:
    """
    配置并返回日志记录器

    已有处理器的记录器原样返回。

    Args:
        name: 日志记录器名称
        log_level: 日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: 日志文件目录，默认为当前目录下的logs
        console_output: 是否输出到stderr
        file_output: 是否写日志文件（当天的日志和只含错误的日志）

    Returns:
        配置好的日志记录器
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = getattr(logging, log_level.upper(), logging.WARNING)
    logger.setLevel(level)
    logger.propagate = False

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    if file_output:
        log_dir = Path(log_dir) if log_dir is not None else Path.cwd() / 'logs'
        log_dir.mkdir(parents=True, exist_ok=True)

        stamp = date.today().strftime('%Y%m%d')
        logger.addHandler(_file_handler(log_dir / f"pattern_catalog_{stamp}.log", level))
        logger.addHandler(_file_handler(log_dir / f"pattern_catalog_error_{stamp}.log",
                                        logging.ERROR))

    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """获取日志记录器，尚未配置时使用默认配置"""
    return setup_logger(name)


def setup_logging(level: int = logging.WARNING,
                  log_dir: Optional[Union[str, Path]] = None) -> logging.Logger:
    """
    按命令行参数重新配置根日志记录器

    Args:
        level: 日志级别
        log_dir: 日志文件目录，为None时不写文件
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    return setup_logger(log_level=logging.getLevelName(level), log_dir=log_dir,
                        file_output=log_dir is not None)


class LoggerMixin:
    """
    日志混入类

    记录器名称为 PatternCatalog.<模块>.<类名>，处理器由根记录器提供。
    """

    @property
    def logger(self) -> logging.Logger:
        cached = self.__dict__.get('_logger')
        if cached is not None:
            return cached

        cls = type(self)
        setup_logger()
        logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{cls.__module__}.{cls.__name__}")

        # 直接写入__dict__，只读属性的类也能缓存
        self.__dict__['_logger'] = logger
        return logger
