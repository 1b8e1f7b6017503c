"""
"job" 频道消息 - 描述某个 Job 的排队、开始、结束等事件。
"""

from enum import Enum

from pubsub_light.pubsub.events import JobChannel
from pubsub_light.pubsub.message import Item, Message
from pubsub_light.pubsub.props import EventProps


class JobChannelMessage(Message):
    """
    "job" 频道的消息。

    创建时自动设置频道名为 "job"；传入 item 时同时填充对象全名、URL
    以及 job_name 属性。

    注意：clone() 得到的是 SimpleMessage，而不是 JobChannelMessage。
    """

    def __init__(self, item: Item | None = None, event: JobChannel | str | None = None):
        super().__init__()
        self.set_channel_name(JobChannel.NAME)
        self.set_event_name(event)
        if item is not None:
            self._set_item_props(item)
            self.set(EventProps.Job.job_name, item.full_name)

    @property
    def job_name(self) -> str | None:
        """关联 Job 的全名。"""
        return self._get_object_name()

    @property
    def object_id(self) -> str | None:
        return self._get_object_id()

    def set_run_status(self, status: str | Enum | None) -> "JobChannelMessage":
        """设置运行状态（job_run_status），支持传入枚举。"""
        if isinstance(status, Enum):
            status = status.name
        return self.set(EventProps.Job.job_run_status, status)
