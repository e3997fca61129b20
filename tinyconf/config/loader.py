"""
配置加载器 - 定位来源、叠加进程属性、解析占位符

加载顺序：
1. 进程属性 <namespace>.configuration 指定位置（URL / 内置资源 / 文件），
   未指定时读取内置默认资源 <namespace>.properties（不存在则为空，不报错）
2. 解析 properties 格式；打开或解析失败记录错误并视为无文件配置
3. 叠加所有 <namespace>. 前缀的进程属性（去掉前缀，覆盖文件值）
4. 含 "{" 的值依次经环境变量、进程属性解析器替换占位符

测试要点：
- test_load_override_file: 覆盖属性指定文件
- test_load_default_resource: 默认内置资源
- test_missing_default_silent: 默认资源缺失不报错
- test_missing_override_logged: 覆盖目标缺失记录错误
- test_overlay_precedence: 进程属性优先于文件
- test_placeholders: 占位符替换顺序
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Mapping
from typing import BinaryIO

import javaproperties

from ..diagnostics import Level, internal_logger
from ..interfaces import IDiagnosticSink, IResolver
from ..models import ConfigurationSource, SourceKind
from ..properties import SystemProperties, system_properties
from ..resolvers import EnvironmentVariableResolver, SystemPropertyResolver, resolve_placeholders
from .settings import LoaderSettings
from .sources import open_resource, open_source
from .store import Configuration

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """配置加载器"""

    def __init__(
        self,
        settings: LoaderSettings | None = None,
        properties: SystemProperties | None = None,
        environ: Mapping[str, str] | None = None,
        resolvers: list[IResolver] | None = None,
        sink: IDiagnosticSink | None = None,
    ):
        self.settings = settings or LoaderSettings()
        self.properties = system_properties if properties is None else properties
        self.environ = os.environ if environ is None else environ
        # 顺序固定：环境变量在前，进程属性在后
        self.resolvers = resolvers if resolvers is not None else [
            EnvironmentVariableResolver(self.environ),
            SystemPropertyResolver(self.properties),
        ]
        self.sink = sink or internal_logger

    def load(self) -> Configuration:
        """加载并返回新的配置存储"""
        store = Configuration()
        self.load_into(store)
        return store

    def load_into(self, store: Configuration) -> None:
        """加载并整体替换已有存储的内容"""
        source, values = self._read_file()
        values.update(self._read_overrides())

        for key, value in values.items():
            if "{" in value:
                values[key] = self._resolve(value)

        store.replace(values, source=source)
        logger.debug(f"已加载 {len(values)} 项配置 (来源: {source})")

    def _read_file(self) -> tuple[ConfigurationSource | None, dict[str, str]]:
        """读取文件来源的配置，失败时返回空配置"""
        location = self.properties.get(self.settings.configuration_property)
        try:
            if location is not None:
                source, stream = open_source(location, self.settings.resource_package)
            else:
                location = self.settings.configuration_file
                stream = open_resource(self.settings.resource_package, location)
                if stream is None:
                    return None, {}
                source = ConfigurationSource(kind=SourceKind.RESOURCE, location=location)

            with stream:
                return source, self._parse(stream)
        except (OSError, ValueError) as e:
            self.sink.log(Level.ERROR, f"Failed loading configuration from '{location}': {e}")
            return None, {}

    def _parse(self, stream: BinaryIO) -> dict[str, str]:
        text = stream.read().decode(self.settings.encoding)
        return javaproperties.loads(text)

    def _read_overrides(self) -> dict[str, str]:
        """收集命名空间前缀的进程属性（去掉前缀）"""
        prefix = self.settings.properties_prefix
        return {
            name[len(prefix):]: value
            for name, value in self.properties.items()
            if name.startswith(prefix)
        }

    def _resolve(self, value: str) -> str:
        for resolver in self.resolvers:
            value = resolve_placeholders(value, resolver, self.sink)
        return value


# 全局配置实例
_configuration: Configuration | None = None
_lock = threading.Lock()


def get_configuration() -> Configuration:
    """获取全局配置（惰性加载，进程内仅加载一次）"""
    global _configuration
    if _configuration is None:
        with _lock:
            if _configuration is None:
                _configuration = ConfigurationLoader().load()
    return _configuration
