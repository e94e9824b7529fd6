#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
设计模式演示启动脚本
"""

import sys
from pathlib import Path

# 添加项目根目录到Python路径
sys.path.insert(0, str(Path(__file__).parent))

from pattern_catalog.main import main


if __name__ == '__main__':
    sys.exit(main())
