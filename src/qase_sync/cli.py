"""CLI 入口 — qase-sync 命令行工具"""

import asyncio
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from qase_sync import __version__
from qase_sync.core.config import DEFAULT_CONFIG_PATH, load_config
from qase_sync.core.exceptions import ConfigError, QaseAPIError, QaseSyncError
from qase_sync.core.logging import get_logger, setup_logging
from qase_sync.runner.engine import SyncEngine
from qase_sync.schema.config import SyncConfig
from qase_sync.schema.result import SyncSummary

logger = get_logger(__name__)
console = Console()
err_console = Console(stderr=True)


@click.command()
@click.option("--config", "config_path", default=DEFAULT_CONFIG_PATH, help="配置文件路径（可选，不存在时只读环境变量）")
@click.option("--verbose", is_flag=True, help="开启详细日志")
@click.version_option(version=__version__)
def cli(config_path: str, verbose: bool):
    """将 Postman 执行报告同步到 Qase 测试运行"""
    setup_logging(verbose=verbose)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        err_console.print(f"[red]❌ 配置错误: {escape(str(e))}[/red]")
        sys.exit(1)

    try:
        summary = asyncio.run(_sync(config))
    except QaseSyncError as e:
        err_console.print(f"[red]❌ Error: {escape(_describe_error(e))}[/red]")
        sys.exit(1)

    _print_summary(summary)
    if summary.run_id is None:
        console.print("[yellow]没有需要同步的用例[/yellow]")
    else:
        console.print("[green]✅ Qase test run created and results submitted.[/green]")


async def _sync(config: SyncConfig) -> SyncSummary:
    engine = SyncEngine(config)
    try:
        return await engine.run()
    finally:
        await engine.close()


def _describe_error(error: QaseSyncError) -> str:
    """优先展示 Qase 返回的响应体"""
    if isinstance(error, QaseAPIError) and error.response_body:
        return error.response_body
    return str(error)


def _print_summary(summary: SyncSummary):
    """打印同步摘要表格"""
    table = Table(title="Qase 同步结果")
    table.add_column("指标", style="cyan")
    table.add_column("值", style="green")

    table.add_row("测试运行", "-" if summary.run_id is None else f"#{summary.run_id}")
    table.add_row("通过/总计", f"{summary.passed}/{summary.total}")
    table.add_row("失败", str(summary.failed))
    table.add_row("跳过（无用例 ID）", str(summary.skipped))

    console.print(table)


def main():
    cli()


if __name__ == "__main__":
    main()
