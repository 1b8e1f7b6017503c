"""
消息属性包基类 - 两类消息（pubsub 与 event）共享的存储与序列化逻辑。

消息刻意设计为非常简单的"字符串 → 字符串"有序属性包，而不是复杂的类型化对象：
总线实现可能是分布式的，简单结构可以避免编组/解组问题，
也鼓励只携带"刚好足够"信息的轻量事件。订阅者据此判断是否关心该事件，
如果关心，再通过宿主平台的常规途径获取完整的领域对象。

【设计要点】
- 组合而非继承：内部持有一个 dict（保持插入顺序），只对外暴露流式 setter/getter，
  不把整套 Mapping 操作公开给调用方
- set() 对 None 名称或 None 值静默忽略，不报错（流式调用优先于严格校验）
- 序列化为扁平 JSON 对象，键值均为字符串，按插入顺序输出
- 内存写入路径理论上不会失败；一旦失败视为内部一致性错误（MessageStateError）

【线程模型】
消息由单个所有者构建，交给总线后应视为只读；
需要并发修改时请为每个接收方 clone() 一份。
"""

import io
import json
from collections.abc import Iterator, Mapping
from typing import Any, TextIO, TypeVar

from loguru import logger

M = TypeVar("M", bound="PropertyMessage")


def _stringify(value: Any) -> str:
    """属性值统一为字符串：容器与布尔值按 JSON 编码，其他标量取 str()。"""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, bool)):
        return json.dumps(value)
    return str(value)


class MessageStateError(RuntimeError):
    """内部一致性错误：不可恢复、不应重试（如内存写入失败）。"""


class PropertyMessage:
    """
    有序字符串属性包，两类消息的公共基类。

    子类通过类属性 _abstract = True 声明自身为抽象类型，
    抽象类型不能直接实例化（只在声明它的类上生效，不会被继承）。
    """

    _abstract = True

    def __init__(self) -> None:
        if type(self).__dict__.get("_abstract", False):
            raise TypeError(f"{type(self).__name__} is abstract; instantiate a concrete subtype")
        self._props: dict[str, str] = {}

    def set(self: M, name: str | None, value: Any) -> M:
        """
        流式属性 setter。

        name 与 value 都不为 None 时才写入，否则保持原状。
        非字符串值按 _stringify() 转为字符串后存储（如 42 → "42"）。
        返回消息自身，支持链式调用。
        """
        if name is not None and value is not None:
            self._props[name] = _stringify(value)
        return self

    def get(self, name: str) -> str | None:
        """获取属性值，未设置时返回 None。"""
        return self._props.get(name)

    @property
    def properties(self) -> dict[str, str]:
        """全部属性的副本（修改副本不影响消息本身）。"""
        return dict(self._props)

    def _copy_into(self, target: M) -> M:
        """把全部属性复制到 target 并返回 target。"""
        target._props.update(self._props)
        return target

    def contains_all(self, properties: Mapping[Any, Any]) -> bool:
        """
        判断消息是否包含 properties 中的全部属性。

        每个键都必须存在且值完全相等（字符串比较）；
        properties 为空时视为满足，返回 True。

        参数:
            properties: 待检查的属性映射（键按 str() 形式比较）

        返回:
            全部匹配返回 True，任一键缺失或值不同返回 False
        """
        for name, expected in properties.items():
            actual = self._props.get(str(name))
            if actual is None or actual != expected:
                return False
        return True

    def write_json(self, writer: TextIO) -> None:
        """
        将属性以 JSON 对象形式写入 writer，写完后 flush。

        参数:
            writer: 文本输出流（文件、StringIO 等）

        异常:
            OSError: 写入 writer 失败时原样抛出
        """
        json.dump(self._props, writer, ensure_ascii=False, separators=(",", ":"))
        writer.flush()

    def to_json(self) -> str:
        """
        将属性序列化为 JSON 字符串。

        返回:
            扁平 JSON 对象文本，如 {"jenkins_channel":"job"}

        异常:
            MessageStateError: 内存写入失败（不应发生）
        """
        buffer = io.StringIO()
        try:
            self.write_json(buffer)
        except OSError as e:
            logger.error(f"Unexpected I/O failure while writing message to memory: {e}")
            raise MessageStateError("Unexpected I/O failure while writing to an in-memory buffer") from e
        return buffer.getvalue()

    @classmethod
    def _props_from_json(cls, text: str) -> Iterator[tuple[str, str]]:
        """
        解析扁平 JSON 对象文本，逐个产出 (属性名, 属性值)。

        null 值跳过（与 set() 的忽略规则一致），其他标量转为字符串。

        异常:
            ValueError: 文本不是合法 JSON，或顶层不是对象
        """
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"Message JSON must be an object, got {type(data).__name__}")
        for name, value in data.items():
            if value is None:
                logger.debug(f"Skipping null message property '{name}'")
                continue
            yield name, _stringify(value)

    def __len__(self) -> int:
        return len(self._props)

    def __contains__(self, name: object) -> bool:
        return name in self._props

    def __str__(self) -> str:
        """与 to_json() 相同。"""
        return self.to_json()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_json()})"
