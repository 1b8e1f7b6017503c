"""
event 消息模块 - 早期版本的简单消息类型。

与 pubsub.Message 的区别：
- 保留属性名使用点号命名空间（"jenkins.channel"、"jenkins.object.name" 等）
- 只接受字符串属性名，不支持枚举
- 没有关联对象（Item）的填充方法

推荐的属性名风格是类似包名的点号形式（如 "a.b.c"），"jenkins" 前缀保留。
"""

from typing import TypeVar

from pubsub_light.base import PropertyMessage

M = TypeVar("M", bound="Message")


class Message(PropertyMessage):
    """event 总线消息抽象基类，只能通过子类实例化。"""

    _abstract = True

    CHANNEL_NAME_KEY = "jenkins.channel"
    EVENT_NAME_KEY = "jenkins.event"

    OBJECT_NAME_KEY = "jenkins.object.name"
    OBJECT_ID_KEY = "jenkins.object.id"
    OBJECT_URL_KEY = "jenkins.object.url"

    def _get_object_name(self) -> str | None:
        return self.get(self.OBJECT_NAME_KEY)

    def _get_object_id(self) -> str | None:
        return self.get(self.OBJECT_ID_KEY)

    def get_channel_name(self) -> str | None:
        return self.get(self.CHANNEL_NAME_KEY)

    def set_channel_name(self: M, name: str | None) -> M:
        return self.set(self.CHANNEL_NAME_KEY, name)

    def get_event_name(self) -> str | None:
        return self.get(self.EVENT_NAME_KEY)

    def set_event_name(self: M, name: str | None) -> M:
        return self.set(self.EVENT_NAME_KEY, name)

    def clone(self) -> "SimpleMessage":
        """克隆为 SimpleMessage（不保留子类型）。"""
        return self._copy_into(SimpleMessage())

    @classmethod
    def from_json(cls, text: str) -> "SimpleMessage":
        """从 JSON 对象文本重建 SimpleMessage；非对象输入抛出 ValueError。"""
        message = SimpleMessage()
        for name, value in cls._props_from_json(text):
            message.set(name, value)
        return message


class SimpleMessage(Message):
    """event 消息的最简具体实现。"""
