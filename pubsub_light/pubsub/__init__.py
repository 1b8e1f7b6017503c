"""
pubsub 消息模型 - 发布/订阅总线上流转的消息与预定义事件目录。

本包只提供消息数据结构，总线本身、订阅者分发与事件过滤都由宿主平台实现：

  发布方 → Message（属性包） → 总线（外部） → 订阅者按 contains_all() 判断是否关心

包含：
- Message / SimpleMessage：有序字符串属性包，支持流式构建、克隆、包含判断和 JSON 序列化
- JobChannelMessage："job" 频道消息
- Events / JobChannel：预定义频道与事件名
- EventProps：预定义属性名
"""

from pubsub_light.base import MessageStateError
from pubsub_light.pubsub.events import Events, JobChannel
from pubsub_light.pubsub.job import JobChannelMessage
from pubsub_light.pubsub.message import Item, Message, SimpleMessage
from pubsub_light.pubsub.props import RESERVED_PREFIX, EventProps, is_reserved

__all__ = [
    "Message",
    "SimpleMessage",
    "JobChannelMessage",
    "Item",
    "Events",
    "JobChannel",
    "EventProps",
    "RESERVED_PREFIX",
    "is_reserved",
    "MessageStateError",
]
