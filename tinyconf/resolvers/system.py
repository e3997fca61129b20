"""进程属性解析器"""

from __future__ import annotations

from ..interfaces import IResolver
from ..properties import SystemProperties, system_properties


class SystemPropertyResolver(IResolver):
    """解析 #{NAME} 形式的进程属性占位符"""

    name = "system properties"
    prefix = "#"

    def __init__(self, properties: SystemProperties | None = None):
        self.properties = system_properties if properties is None else properties

    def resolve(self, name: str) -> str | None:
        return self.properties.get(name)
