"""
pubsub-light - 轻量级发布/订阅事件消息模型

模块概述：
    本包为宿主平台内嵌的发布/订阅事件总线提供消息抽象：
    消息是有序的"字符串 → 字符串"属性包，可以流式构建、克隆、
    按属性子集匹配，并序列化为扁平 JSON 对象。

    包含：
    - pubsub：消息类型（Message / SimpleMessage / JobChannelMessage）与预定义事件目录
    - event：早期版本的点号命名空间消息类型
    - config：CLI 使用的配置（输出格式、保留命名空间、日志级别）
    - cli：命令行工具

    总线本身、订阅者分发和访问控制不在本包范围内。
"""

from loguru import logger

# 版本号，遵循语义化版本规范（主版本.次版本.修订号）
__version__ = "0.1.0"

# 项目 logo 表情符号，用于 CLI 输出
__logo__ = "📨"

# 作为库被导入时默认关闭日志输出，由调用方（如 CLI 的 --logs）按需开启
logger.disable("pubsub_light")
