"""
配置来源模型

对应加载顺序：覆盖属性指定的 URL / 内置资源 / 文件路径，或默认内置资源
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class SourceKind(str, Enum):
    """来源类型"""
    URL = "url"
    RESOURCE = "resource"
    FILE = "file"


class ConfigurationSource(BaseModel):
    """已定位的配置文件来源"""

    model_config = ConfigDict(frozen=True)

    kind: SourceKind
    location: str

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.location}"
