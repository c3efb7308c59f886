"""新闻文章事件总线 - 主入口点

    python -m news_bus demo
    python -m news_bus config
"""

from .presentation.cli import run_cli


def main() -> None:
    """主入口函数"""
    run_cli()


if __name__ == "__main__":
    main()
