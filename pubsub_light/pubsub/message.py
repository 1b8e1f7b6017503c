"""
pubsub 消息模块 - 发布/订阅总线上传输的消息类型。

本模块定义：
- Item：宿主平台领域对象的句柄协议（提供全名和 URL）
- Message：消息抽象基类，在属性包之上提供频道名、事件名、关联对象等便捷访问
- SimpleMessage：Message 的最简具体实现，也是 clone() 的产物类型

保留属性名见 EventProps.Jenkins（如 "jenkins_channel"、"jenkins_event"）。
属性名参数既可以是字符串，也可以是枚举成员（取成员的 name）。

示例:
    SimpleMessage().set_channel_name("job").set_event_name("run_started").set("build_number", "42")
    # → {"jenkins_channel":"job","jenkins_event":"run_started","build_number":"42"}
"""

from enum import Enum
from typing import Any, Protocol, TypeVar, runtime_checkable

from pubsub_light.base import PropertyMessage
from pubsub_light.pubsub.props import EventProps

M = TypeVar("M", bound="Message")

Jenkins = EventProps.Jenkins


@runtime_checkable
class Item(Protocol):
    """宿主平台领域对象句柄（如一个 Job），消息只引用其全名和 URL。"""

    @property
    def full_name(self) -> str: ...

    @property
    def url(self) -> str: ...


def _prop_name(name: str | Enum | None) -> str | None:
    """属性名归一化：枚举成员取其 name，字符串和 None 原样返回。"""
    if isinstance(name, Enum):
        return name.name
    return name


class Message(PropertyMessage):
    """
    总线消息抽象基类。

    只能通过子类实例化（直接 Message() 会抛出 TypeError）。
    所有 setter 返回消息自身，便于链式构建。

    关联对象相关的 getter 与 _set_item_props() 以下划线开头，
    只供子类使用，不属于面向消费方的公共接口。
    """

    _abstract = True

    def set(self: M, name: str | Enum | None, value: Any) -> M:
        """
        流式属性 setter（支持枚举属性名）。

        参数:
            name: 属性名或属性名枚举
            value: 属性值，非字符串会被转为字符串；name 或 value 为 None 时静默忽略

        返回:
            消息自身
        """
        return super().set(_prop_name(name), value)

    def get(self, name: str | Enum) -> str | None:
        """获取属性值（支持枚举属性名），未设置时返回 None。"""
        return super().get(_prop_name(name))

    def get_channel_name(self) -> str | None:
        """频道名，未设置时返回 None。"""
        return self.get(Jenkins.jenkins_channel)

    def set_channel_name(self: M, name: str | None) -> M:
        return self.set(Jenkins.jenkins_channel, name)

    def get_event_name(self) -> str | None:
        """事件名，未设置时返回 None。"""
        # 不提供返回枚举的版本：事件名可能不在预定义目录中
        return self.get(Jenkins.jenkins_event)

    def set_event_name(self: M, name: str | Enum | None) -> M:
        """设置事件名，可直接传入 Events 目录中的枚举成员。"""
        return self.set(Jenkins.jenkins_event, _prop_name(name))

    def _get_object_name(self) -> str | None:
        """关联领域对象的全名。"""
        return self.get(Jenkins.jenkins_object_name)

    def _get_object_id(self) -> str | None:
        """关联领域对象的 ID，未设置时返回 None。"""
        return self.get(Jenkins.jenkins_object_id)

    def _set_item_props(self: M, item: Item) -> M:
        """用领域对象句柄填充对象全名和 URL 属性。"""
        self.set(Jenkins.jenkins_object_name, item.full_name)
        self.set(Jenkins.jenkins_object_url, item.url)
        return self

    def clone(self) -> "SimpleMessage":
        """
        克隆消息。

        无论源消息是什么子类型，克隆结果始终是 SimpleMessage，
        子类型身份会丢失，只保留全部属性。
        """
        return self._copy_into(SimpleMessage())

    @classmethod
    def from_json(cls, text: str) -> "SimpleMessage":
        """
        从 to_json() 产出的 JSON 文本重建消息。

        参数:
            text: 扁平 JSON 对象文本

        返回:
            包含全部属性的 SimpleMessage

        异常:
            ValueError: 文本不是 JSON 对象
        """
        message = SimpleMessage()
        for name, value in cls._props_from_json(text):
            message.set(name, value)
        return message


class SimpleMessage(Message):
    """最简具体消息，没有额外行为。"""
