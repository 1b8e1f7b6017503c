"""
配置加载工具模块 (config/loader.py)
=================================
本模块负责 pubsub-light 配置文件的加载、保存和格式转换：
- 配置文件默认路径: ~/.pubsub_light/config.json
- 配置文件使用 camelCase（驼峰命名），Python 内部使用 snake_case（下划线命名）
- 加载时自动将 camelCase → snake_case，保存时自动将 snake_case → camelCase
"""

import json
import re
from collections.abc import Callable
from pathlib import Path
from typing import Any

from loguru import logger

from pubsub_light.config.schema import Config

# 小写或数字后紧跟大写字母的位置，即 camelCase 的单词边界
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def get_config_path() -> Path:
    """获取默认配置文件路径: ~/.pubsub_light/config.json"""
    return Path.home() / ".pubsub_light" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    从 JSON 文件加载配置，若文件不存在则返回默认配置。

    加载流程：
    1. 确定配置文件路径（传入的路径 或 默认路径）
    2. 读取 JSON 文件内容
    3. 将 camelCase 键名转换为 snake_case
    4. 使用 Pydantic 的 model_validate 进行类型验证和反序列化

    参数:
        config_path: 可选的配置文件路径。为 None 时使用默认路径。

    返回:
        Config 配置对象实例
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            return Config.model_validate(_rename_keys(data, camel_to_snake))
        except (json.JSONDecodeError, ValueError) as e:
            # 配置文件损坏时降级使用默认配置，而非直接报错退出
            logger.warning(f"Failed to load config from {path}: {e}")
            logger.warning("Using default configuration.")

    return Config()


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    将配置对象保存为 JSON 文件（camelCase 键名，带缩进）。

    参数:
        config: 要保存的配置对象
        config_path: 可选的保存路径。为 None 时使用默认路径。
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = _rename_keys(config.model_dump(), snake_to_camel)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _rename_keys(data: Any, rename: Callable[[str], str]) -> Any:
    """递归重命名嵌套字典的键（配置只有 "分组 → 字段" 两层字典，不含列表）。"""
    if not isinstance(data, dict):
        return data
    return {rename(k): _rename_keys(v, rename) for k, v in data.items()}


def camel_to_snake(name: str) -> str:
    """camelCase 转 snake_case，例: "sortKeys" → "sort_keys"。"""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def snake_to_camel(name: str) -> str:
    """snake_case 转 camelCase，例: "warn_reserved" → "warnReserved"。"""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)
