"""
工具函数模块 - 提供 pubsub-light 全局通用的辅助函数。
"""

from pubsub_light.utils.helpers import parse_properties, parse_property, render_json

__all__ = ["parse_property", "parse_properties", "render_json"]
