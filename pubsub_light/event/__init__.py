"""
event 消息模型 - 早期版本的消息类型（点号命名空间属性名）。

新代码请使用 pubsub_light.pubsub；本包保留给仍按 "jenkins.channel" 等键名
收发消息的旧订阅方。
"""

from pubsub_light.event.message import Message, SimpleMessage

__all__ = ["Message", "SimpleMessage"]
