"""
预定义事件类型目录 - 标准化的频道名与事件名常量。

当然可以创建这里没有预定义的新事件，本目录的作用是帮助各方在事件类型上
形成统一的命名。如果需要新的事件类型（或频道），请在此处新增枚举，
而不是在运行时注册：目录是封闭的。

每个频道对应一个枚举类：
- 枚举成员即事件名（成员的 name 就是属性值）
- NAME 常量是频道名（用 nonmember 声明，不会成为枚举成员）
"""

from enum import Enum, nonmember


class JobChannel(Enum):
    """预定义的 "job" 频道事件。"""

    job_queued = "job_queued"    # 任务进入构建队列
    run_started = "run_started"  # 任务运行开始
    run_ended = "run_ended"      # 任务运行结束

    NAME = nonmember("job")      # 频道名


class Events:
    """
    事件目录入口 - 按频道分组的预定义事件枚举。

    用法:
        Events.JobChannel.NAME            # "job"
        Events.JobChannel.run_started     # 事件成员
        Events.find("job", "run_ended")   # 按名称查找
    """

    JobChannel = JobChannel

    @classmethod
    def channels(cls) -> dict[str, type[Enum]]:
        """返回 {频道名: 事件枚举类} 映射，按声明顺序排列。"""
        return {JobChannel.NAME: JobChannel}

    @classmethod
    def find(cls, channel: str, event: str) -> Enum | None:
        """
        按频道名和事件名查找预定义事件。

        参数:
            channel: 频道名（如 "job"）
            event: 事件名（如 "run_started"）

        返回:
            对应的枚举成员；频道或事件未预定义时返回 None
        """
        events = cls.channels().get(channel)
        if events is None:
            return None
        return events.__members__.get(event)
