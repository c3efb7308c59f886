"""CLI主应用 - 基于Click和Rich"""

from __future__ import annotations

import sys
from concurrent.futures import Future, wait

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...domain.topics import DomainTopic, describe_topic
from ...domain.value_objects import NewsDomain, NewsSubdomain
from ...infrastructure.config import get_container, get_settings, reset_container
from ...shared.constants import VERSION
from ...shared.exceptions import NewsBusError
from ...shared.utils import setup_logger

console = Console()


@click.group()
@click.version_option(VERSION, prog_name="news-bus")
@click.option("--debug", is_flag=True, help="启用调试模式")
def cli(debug: bool):
    """新闻文章事件总线 - 命令行工具"""
    try:
        settings = get_settings()
    except NewsBusError as e:
        console.print(f"[red]{e}")
        sys.exit(2)

    setup_logger(
        level="DEBUG" if debug else settings.effective_log_level,
        log_to_file=settings.log_to_file,
        json_format=settings.log_json,
    )


@cli.command()
@click.option("--author", "-a", default="Alice", show_default=True, help="编辑名称")
@click.option("--title", "-t", default="Match report", show_default=True, help="文章标题")
@click.option(
    "--domain",
    "-d",
    type=click.Choice([d.value for d in NewsDomain]),
    default=NewsDomain.SPORTS.value,
    show_default=True,
    help="文章所属领域",
)
@click.option("--subdomain", "-s", default="football", show_default=True, help="子领域名称")
@click.option("--reads", "-r", default=2, show_default=True, type=click.IntRange(min=0), help="阅读次数")
@click.option("--timeout", default=5.0, show_default=True, type=float, help="等待投递完成的秒数")
def demo(author: str, title: str, domain: str, subdomain: str, reads: int, timeout: float):
    """
    运行端到端演示：撰写 → 发布 → 阅读 → 删除

    示例:
        news-bus demo
        news-bus demo -a Bob -t "GPU roadmap" -d tech -s hardware -r 3
    """
    container = get_container()
    futures: list[Future[bool]] = []

    try:
        channel = container.channel
        store = container.store
        editor = container.create_editor(author)
        reader = container.create_reader()

        domain_hits: list[str] = []
        reader.register(
            DomainTopic(NewsDomain(domain)),
            lambda event: domain_hits.append(event.kind.value),
        )

        article = editor.write(NewsSubdomain(subdomain, NewsDomain(domain)), title)

        futures += editor.publish(article)
        channel.wait_idle(timeout)
        published_snapshot = list(store.articles)

        for _ in range(reads):
            futures += reader.read(article)
        channel.wait_idle(timeout)

        futures += editor.delete(article)
        channel.wait_idle(timeout)
        wait(futures, timeout=timeout)

        _display_summary(
            author=author,
            article_title=article.title,
            published=len(published_snapshot),
            remaining=len(store),
            read_notifications=len(editor.read_events),
            domain_events=sorted(domain_hits),
            topics=[describe_topic(t) for t in channel.topics],
            failures=sum(1 for f in futures if f.done() and not f.result()),
        )
    except NewsBusError as e:
        console.print(f"[red]演示失败: {e}")
        sys.exit(1)
    finally:
        reset_container()


@cli.command()
def config():
    """显示当前生效的配置"""
    settings = get_settings()

    table = Table(title="当前配置", show_header=True, header_style="bold cyan")
    table.add_column("配置项")
    table.add_column("值")
    table.add_row("debug", str(settings.debug))
    table.add_row("log_level", settings.effective_log_level)
    table.add_row("log_to_file", str(settings.log_to_file))
    table.add_row("log_json", str(settings.log_json))
    table.add_row("channel.max_workers", str(settings.channel.max_workers))
    table.add_row("channel.thread_name_prefix", settings.channel.thread_name_prefix)
    table.add_row(
        "channel.pending_warning_threshold", str(settings.channel.pending_warning_threshold)
    )
    console.print(table)


def _display_summary(
    *,
    author: str,
    article_title: str,
    published: int,
    remaining: int,
    read_notifications: int,
    domain_events: list[str],
    topics: list[str],
    failures: int,
) -> None:
    """显示演示结果"""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("检查项")
    table.add_column("结果")
    table.add_row("发布后存储中的文章数", str(published))
    table.add_row("删除后存储中的文章数", str(remaining))
    table.add_row(f"编辑 {author} 收到的阅读通知", str(read_notifications))
    table.add_row("领域订阅收到的事件", ", ".join(domain_events) or "-")
    table.add_row("投递失败数", str(failures))

    console.print(Panel(f"[bold]{article_title}[/bold]", title="演示文章", border_style="green"))
    console.print(table)

    topic_table = Table(title="已注册主题", show_header=False)
    topic_table.add_column("主题")
    for topic in topics:
        topic_table.add_row(topic)
    console.print(topic_table)


def run_cli() -> None:
    """运行CLI"""
    cli()


if __name__ == "__main__":
    run_cli()
