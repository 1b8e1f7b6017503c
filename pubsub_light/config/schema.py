"""
配置数据模型定义 (config/schema.py)
=================================
本模块使用 Pydantic 定义 pubsub-light 的配置结构。
所有配置项都有默认值，用户只需在 config.json 中覆盖需要修改的部分。

整体配置结构（树形）：
Config (根配置)
├── output        - JSON 输出格式（缩进、ASCII 转义、键排序），CLI 渲染消息时使用
├── namespace     - 保留命名空间约定（保留前缀、是否提示）
└── logging       - 日志级别

注意：消息本身的 to_json() 不读取配置，输出始终是紧凑、按插入顺序的 JSON；
配置只影响 CLI 的展示。
"""

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings

from pubsub_light.pubsub.props import RESERVED_PREFIX


class OutputConfig(BaseModel):
    """CLI 输出消息 JSON 时的格式选项。"""
    indent: int | None = None  # 缩进空格数，None 为紧凑单行
    ensure_ascii: bool = False  # 是否把非 ASCII 字符转义为 \uXXXX
    sort_keys: bool = False  # 是否按键名排序（默认保持插入顺序）


class NamespaceConfig(BaseModel):
    """属性名保留命名空间约定。"""
    reserved_prefix: str = RESERVED_PREFIX  # 宿主平台保留前缀
    warn_reserved: bool = True  # 用户自定义属性使用保留前缀时是否记录警告


class LoggingConfig(BaseModel):
    """日志配置。"""
    level: str = "INFO"  # loguru 日志级别

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        allowed = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in allowed:
            raise ValueError(f"Invalid log level {v!r}. Must be one of: {sorted(allowed)}")
        return upper


class Config(BaseSettings):
    """
    pubsub-light 根配置。

    支持 PUBSUB_LIGHT_ 前缀的环境变量覆盖，嵌套字段用 __ 分隔，
    如 PUBSUB_LIGHT_OUTPUT__INDENT=2。
    """
    output: OutputConfig = OutputConfig()
    namespace: NamespaceConfig = NamespaceConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = ConfigDict(
        env_prefix="PUBSUB_LIGHT_",
        env_nested_delimiter="__"
    )
