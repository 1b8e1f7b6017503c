"""
CLI 命令模块 - pubsub-light 的命令行命令定义。

本模块使用 Typer 框架定义 CLI 命令：
- onboard：初始化配置文件
- events：列出预定义的频道与事件
- message：按参数构建一条消息并输出 JSON
- contains：判断一条消息 JSON 是否包含给定属性
- status：查看配置状态

技术栈：
- Typer：CLI 框架（基于 Click，支持类型注解自动生成帮助文档）
- Rich：终端美化输出（表格、颜色）

退出码约定：
- contains 匹配返回 0，不匹配返回 1
- 参数或输入格式错误返回 2
"""

import sys

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from pubsub_light import __logo__, __version__

# 创建 Typer 应用实例（CLI 根命令）
app = typer.Typer(
    name="pubsub-light",
    help=f"{__logo__} pubsub-light - Light-weight pub/sub event messages",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)  # 提示信息走 stderr，stdout 只输出消息 JSON


def version_callback(value: bool):
    """当用户传入 --version 参数时，打印版本号并退出。"""
    if value:
        console.print(f"{__logo__} pubsub-light v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """pubsub-light CLI 根命令回调。处理全局选项（如 --version）。"""
    pass


def _enable_logging(level: str) -> None:
    """--logs 时按配置的级别输出库日志（库日志默认在包导入时关闭）。"""
    logger.remove()
    logger.add(sys.stderr, level=level)
    logger.enable("pubsub_light")


def _fail(message: str) -> None:
    """打印错误并以退出码 2 结束。"""
    console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(2)


# ============================================================================
# Onboard / Status
# ============================================================================


@app.command()
def onboard():
    """在 ~/.pubsub_light/config.json 写入默认配置。"""
    from pubsub_light.config.loader import get_config_path, save_config
    from pubsub_light.config.schema import Config

    config_path = get_config_path()

    if config_path.exists():
        console.print(f"[yellow]Config already exists at {config_path}[/yellow]")
        if not typer.confirm("Overwrite?"):
            raise typer.Exit()

    save_config(Config(), config_path)
    console.print(f"[green]✓[/green] Created config at {config_path}")


@app.command()
def status():
    """显示配置文件路径与生效的配置。"""
    from pubsub_light.config.loader import get_config_path, load_config

    config_path = get_config_path()
    config = load_config()

    console.print(f"{__logo__} pubsub-light Status\n")
    console.print(f"Config: {config_path} {'[green]✓[/green]' if config_path.exists() else '[red]✗[/red]'}")
    console.print(f"Reserved prefix: {config.namespace.reserved_prefix}", markup=False)
    console.print(f"Warn on reserved: {config.namespace.warn_reserved}")
    console.print(f"JSON indent: {config.output.indent}")
    console.print(f"Log level: {config.logging.level}")


# ============================================================================
# Event catalog
# ============================================================================


@app.command()
def events():
    """列出预定义的频道与事件。"""
    from pubsub_light.pubsub.events import Events

    table = Table(title="Pre-defined Events")
    table.add_column("Channel", style="cyan")
    table.add_column("Event", style="green")

    for channel, members in Events.channels().items():
        for member in members:
            table.add_row(channel, member.name)

    console.print(table)


# ============================================================================
# Messages
# ============================================================================


@app.command()
def message(
    channel: str = typer.Option(None, "--channel", "-c", help="Channel name (e.g. 'job')"),
    event: str = typer.Option(None, "--event", "-e", help="Event name (e.g. 'run_started')"),
    prop: list[str] = typer.Option(None, "--prop", "-p", help="Message property as name=value (repeatable)"),
    legacy: bool = typer.Option(False, "--legacy", help="Use dotted 'jenkins.*' reserved keys"),
    logs: bool = typer.Option(False, "--logs/--no-logs", help="Show pubsub-light runtime logs"),
):
    """构建一条消息并输出其 JSON。"""
    from pubsub_light.config.loader import load_config
    from pubsub_light.event import SimpleMessage as LegacyMessage
    from pubsub_light.pubsub import Events, SimpleMessage, is_reserved
    from pubsub_light.utils.helpers import parse_properties, render_json

    config = load_config()
    if logs:
        _enable_logging(config.logging.level)

    try:
        properties = parse_properties(prop)
    except ValueError as e:
        _fail(str(e))

    msg = LegacyMessage() if legacy else SimpleMessage()
    msg.set_channel_name(channel).set_event_name(event)

    if channel and event and Events.find(channel, event) is None:
        logger.debug(f"Event '{channel}/{event}' is not a pre-defined event")

    for name, value in properties.items():
        if config.namespace.warn_reserved and is_reserved(name, config.namespace.reserved_prefix):
            err_console.print(
                f"[yellow]Warning: property '{name}' uses the reserved '{config.namespace.reserved_prefix}' prefix[/yellow]",
                highlight=False,
                soft_wrap=True,
            )
        msg.set(name, value)

    console.print(render_json(msg.properties, config.output), markup=False, highlight=False, soft_wrap=True)


@app.command()
def contains(
    message_json: str = typer.Argument(..., help="Message JSON object"),
    prop: list[str] = typer.Option(None, "--prop", "-p", help="Expected property as name=value (repeatable)"),
    legacy: bool = typer.Option(False, "--legacy", help="Parse as a legacy dotted-key message"),
):
    """判断消息是否包含全部给定属性：输出 true/false，退出码 0/1。"""
    from pubsub_light.event import Message as LegacyMessage
    from pubsub_light.pubsub import Message
    from pubsub_light.utils.helpers import parse_properties

    try:
        expected = parse_properties(prop)
        msg = (LegacyMessage if legacy else Message).from_json(message_json)
    except ValueError as e:
        _fail(str(e))

    matched = msg.contains_all(expected)
    console.print("true" if matched else "false", highlight=False)
    if not matched:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
