"""
设计模式演示主程序
"""

import argparse
import logging
import sys
from typing import List, Optional

from pattern_catalog.demos import DemoRegistry
from pattern_catalog.services.config_service import ConfigService
from pattern_catalog.services.log_service import setup_logging
from pattern_catalog.utils.exceptions import PatternCatalogException, get_user_friendly_message


def build_parser(registry: DemoRegistry) -> argparse.ArgumentParser:
    """创建命令行参数解析器"""
    names = [demo.name for demo in registry.list_demos()]
    parser = argparse.ArgumentParser(
        prog='pattern-catalog',
        description='Console demonstrations of classic design patterns'
    )
    parser.add_argument('--pattern', choices=names + ['all'], default='all',
                        help='pattern to demonstrate (default: all)')
    parser.add_argument('--list', action='store_true',
                        help='list the available demos and exit')
    parser.add_argument('--config', type=str, default=None,
                        help='config file path (yaml or json)')
    parser.add_argument('--debug', action='store_true',
                        help='enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    registry = DemoRegistry()
    args = build_parser(registry).parse_args(argv)

    if args.list:
        for demo in registry.list_demos():
            print(f"{demo.name:<24} {demo.category:<11} {demo.description}")
        return 0

    try:
        config_service = ConfigService.get_instance()
        if args.config:
            config = config_service.load_config(args.config)
        else:
            config = config_service.config

        log_level = logging.DEBUG if args.debug else logging.getLevelName(config.log_level)
        setup_logging(log_level, config.log_dir)

        if args.pattern == 'all':
            registry.run_all(sys.stdout, config)
        else:
            registry.run(args.pattern, sys.stdout, config)

    except KeyboardInterrupt:
        print("\n\nCancelled")
        return 130
    except PatternCatalogException as e:
        print(f"\nError: {get_user_friendly_message(e)} ({e})", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
