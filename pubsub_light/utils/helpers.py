"""
工具函数集合 - pubsub-light 通用的辅助函数。

函数分类：
- 解析工具：parse_property, parse_properties
- 输出工具：render_json
"""

import json

from pubsub_light.config.schema import OutputConfig


def parse_property(text: str) -> tuple[str, str]:
    """
    解析 "name=value" 形式的属性字符串。

    只按第一个等号分割，值中可以包含等号；值可以为空字符串。

    参数:
        text: 属性字符串，如 "build_number=42"

    返回:
        (name, value) 元组

    异常:
        ValueError: 缺少等号或属性名为空
    """
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise ValueError(f"Invalid property {text!r}, expected name=value")
    return name, value


def parse_properties(items: list[str] | None) -> dict[str, str]:
    """批量解析属性字符串，保持顺序，重复的属性名以后出现的为准。"""
    return dict(parse_property(item) for item in items or [])


def render_json(properties: dict[str, str], output: OutputConfig) -> str:
    """按输出配置渲染属性 JSON（缩进、ASCII 转义、键排序）。"""
    return json.dumps(
        properties,
        indent=output.indent,
        ensure_ascii=output.ensure_ascii,
        sort_keys=output.sort_keys,
    )
