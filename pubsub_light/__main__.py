"""
pubsub_light 模块入口点 - 支持通过 `python -m pubsub_light` 方式启动

启动链路：
python -m pubsub_light → __main__.py → cli/commands.py 中的 Typer app
"""

from pubsub_light.cli.commands import app

if __name__ == "__main__":
    app()
