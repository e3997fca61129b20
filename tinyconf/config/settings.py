"""
加载器设置 - 命名空间、默认文件名与资源包

职责：
- 提供加载器的静态参数
- 支持环境变量覆盖（TINYCONF_ 前缀）
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings


class LoaderSettings(BaseSettings):
    """加载器设置（支持环境变量覆盖）"""

    # 进程属性命名空间，如 tinylog -> tinylog.level / tinylog.configuration
    namespace: str = "tinylog"
    # 默认配置文件名（空则为 <namespace>.properties）
    default_file: str = ""
    # 内置资源所在的包
    resource_package: str = "tinyconf.resources"
    # properties 文件编码
    encoding: str = "latin-1"

    model_config = {
        "env_prefix": "TINYCONF_",
    }

    @field_validator("namespace")
    @classmethod
    def _check_namespace(cls, value: str) -> str:
        if not value or value.endswith("."):
            raise ValueError(f"invalid namespace: {value!r}")
        return value

    @property
    def properties_prefix(self) -> str:
        """进程属性覆盖前缀"""
        return self.namespace + "."

    @property
    def configuration_property(self) -> str:
        """指定配置文件位置的进程属性名"""
        return self.properties_prefix + "configuration"

    @property
    def configuration_file(self) -> str:
        """默认内置配置文件名"""
        return self.default_file or f"{self.namespace}.properties"
