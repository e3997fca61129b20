"""配置项模型"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PropertyEntry(BaseModel):
    """配置项（键区分大小写，"." 表示层级，"@" 之后视为不透明段）"""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="配置键，如 writer.level")
    value: str
