"""
事件属性名目录 - 预定义的消息属性名称。

消息的属性名是不透明的字符串，任何字符串都合法，但推荐使用下划线做命名空间
划分（如 "a_b_c"），以减少命名冲突。

【保留命名空间】
以 "jenkins" 为前缀的属性名保留给宿主平台使用（如 "jenkins_channel"）。
这只是约定：Message 不会在运行时拒绝此类属性名，
is_reserved() 供 CLI 等调用方自行提示。
"""

from enum import Enum

# 宿主平台保留的属性名前缀
RESERVED_PREFIX = "jenkins"


class EventProps:
    """预定义属性名枚举的分组容器。"""

    class Jenkins(Enum):
        """
        宿主平台保留的属性名。

        Message 的频道名、事件名以及关联对象的各类 getter/setter
        都建立在这些键之上。
        """

        jenkins_channel = "jenkins_channel"          # 频道名
        jenkins_event = "jenkins_event"              # 事件名
        jenkins_object_name = "jenkins_object_name"  # 关联对象全名
        jenkins_object_id = "jenkins_object_id"      # 关联对象 ID（可为空）
        jenkins_object_url = "jenkins_object_url"    # 关联对象 URL

    class Job(Enum):
        """"job" 频道事件常用的属性名。"""

        job_name = "job_name"
        job_run_queueId = "job_run_queueId"
        job_run_status = "job_run_status"


def is_reserved(name: str, prefix: str = RESERVED_PREFIX) -> bool:
    """
    判断属性名是否落在保留命名空间内。

    属性名等于前缀本身，或以 "前缀_"、"前缀." 开头时视为保留；
    "jenkinsfile_path" 这类只是字面上以前缀开头的名称不算。

    参数:
        name: 属性名
        prefix: 保留前缀，默认 "jenkins"

    返回:
        属性名落在保留命名空间内时返回 True
    """
    return name == prefix or name.startswith((f"{prefix}_", f"{prefix}."))
