"""HostSwitch CLI 入口点。"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from hostswitch.app import HostSwitch
from hostswitch.config import Config
from hostswitch.errors import HostSwitchError

APP_HELP = "在 /etc/hosts 的受管区域中切换主机记录"

app = typer.Typer(add_completion=False, help=APP_HELP)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    ctx: typer.Context,
    hosts_file: Optional[Path] = typer.Option(
        None, "--hosts-file", help="hosts 文件路径（默认取 HOSTS_FILE 或 /etc/hosts）"
    ),
) -> None:
    config = Config.from_env()
    if hosts_file is not None:
        config.hosts_file_path = str(hosts_file)
    ctx.obj = config


def _build(ctx: typer.Context) -> HostSwitch:
    try:
        return HostSwitch(ctx.obj)
    except ValueError as e:
        err_console.print(f"配置无效: {e}", style="red")
        raise typer.Exit(code=1)


def _fail(e: Exception) -> None:
    err_console.print(str(e), style="red", markup=False)
    raise typer.Exit(code=1)


@app.command("list")
def list_cmd(ctx: typer.Context) -> None:
    """列出受管区域中的记录"""
    switch = _build(ctx)
    try:
        entries = switch.list_entries()
    except HostSwitchError as e:
        _fail(e)
        return

    if not entries:
        console.print("没有受管的主机记录", style="dim")
        console.print("在 hosts 文件的受管区域中添加记录，或使用 add 命令", style="dim")
        return

    table = Table()
    table.add_column("#", justify="right")
    table.add_column("状态")
    table.add_column("主机名")
    table.add_column("地址")
    table.add_column("注释")
    for i, entry in enumerate(entries, start=1):
        status = "[green]on[/green]" if entry.enabled else "[red]off[/red]"
        table.add_row(str(i), status, Text(entry.hostname), Text(entry.address), Text(entry.comment))
    console.print(table)


@app.command()
def add(
    ctx: typer.Context,
    address: str = typer.Argument(..., help="IP 地址"),
    hostname: str = typer.Argument(..., help="主机名"),
    comment: str = typer.Option("", "--comment", "-c", help="可选注释"),
) -> None:
    """添加一条启用的记录"""
    switch = _build(ctx)
    try:
        entry = switch.add(address, hostname, comment)
    except HostSwitchError as e:
        _fail(e)
        return
    console.print(f"已添加: {entry}", style="green", markup=False)


@app.command()
def toggle(
    ctx: typer.Context,
    index: int = typer.Argument(..., help="list 输出中的序号"),
) -> None:
    """切换一条记录的启用状态"""
    switch = _build(ctx)
    try:
        entry = switch.toggle(index)
    except (HostSwitchError, IndexError) as e:
        _fail(e)
        return
    console.print(f"已切换: {entry}", style="green", markup=False)


@app.command()
def preview(ctx: typer.Context) -> None:
    """输出重建后的完整 hosts 文件，不写入"""
    switch = _build(ctx)
    try:
        content = switch.preview()
    except HostSwitchError as e:
        _fail(e)
        return
    typer.echo(content)
