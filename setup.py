"""
设计模式演示集安装配置
"""

from setuptools import setup, find_packages
from pathlib import Path

# 读取README文件
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding='utf-8')

# 读取依赖
requirements = (this_directory / "requirements.txt").read_text(encoding='utf-8').splitlines()
requirements = [r.strip() for r in requirements if r.strip() and not r.startswith('#')]

setup(
    name="pattern-catalog",
    version="1.0.0",
    author="Pattern Catalog Team",
    description="经典设计模式的控制台演示",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["pattern_catalog", "pattern_catalog.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0,<9"],
    },
    entry_points={
        "console_scripts": [
            "pattern-catalog=pattern_catalog.main:main",
        ],
    },
)
