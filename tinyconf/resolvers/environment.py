"""环境变量解析器"""

from __future__ import annotations

import os
from collections.abc import Mapping

from ..interfaces import IResolver


class EnvironmentVariableResolver(IResolver):
    """解析 ${NAME} 形式的环境变量占位符"""

    name = "environment variables"
    prefix = "$"

    def __init__(self, environ: Mapping[str, str] | None = None):
        self.environ = os.environ if environ is None else environ

    def resolve(self, name: str) -> str | None:
        return self.environ.get(name)
