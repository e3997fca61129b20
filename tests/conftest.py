"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(make_loader, properties, write_resource):
        write_resource("tinylog.properties", "level = info\n")
        properties.set("tinylog.level", "debug")
        assert make_loader().load().get("level") == "debug"
"""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import Callable

import pytest

from tinyconf.config import Configuration, ConfigurationLoader, LoaderSettings
from tinyconf.diagnostics import Level
from tinyconf.properties import SystemProperties


class RecordingSink:
    """记录诊断消息的测试出口"""

    def __init__(self):
        self.records: list[tuple[Level, str]] = []

    def log(self, level: Level, message: str) -> None:
        self.records.append((level, message))

    def messages(self, level: Level) -> list[str]:
        return [message for lvl, message in self.records if lvl == level]


# ============================================================================
# 基础 Fixtures
# ============================================================================

@pytest.fixture
def sink() -> RecordingSink:
    """诊断记录"""
    return RecordingSink()


@pytest.fixture
def properties() -> SystemProperties:
    """独立的进程属性表（不污染全局实例）"""
    return SystemProperties()


@pytest.fixture
def environ() -> dict[str, str]:
    """模拟环境变量"""
    return {"HOME": "/x", "APP": "demo"}


@pytest.fixture
def store() -> Configuration:
    """示例配置存储"""
    return Configuration({
        "writer": "console",
        "writerFile": "file",
        "writer.level": "info",
        "writer.format": "{message}",
        "level": "debug",
        "level@com.example.pkg": "trace",
    })


# ============================================================================
# 内置资源 Fixtures
# ============================================================================

@pytest.fixture
def resource_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """在临时目录创建资源包并加入 sys.path，返回包名"""
    name = f"cfgres_{uuid.uuid4().hex}"
    package_dir = tmp_path / "site" / name
    package_dir.mkdir(parents=True)
    (package_dir / "__init__.py").write_text("")
    monkeypatch.syspath_prepend(str(tmp_path / "site"))
    return name


@pytest.fixture
def write_resource(tmp_path: Path, resource_package: str) -> Callable[[str, str], Path]:
    """向资源包写入文件"""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / "site" / resource_package / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="latin-1")
        return path

    return _write


@pytest.fixture
def settings(resource_package: str) -> LoaderSettings:
    """指向临时资源包的加载器设置"""
    return LoaderSettings(resource_package=resource_package)


@pytest.fixture
def make_loader(
    settings: LoaderSettings,
    properties: SystemProperties,
    environ: dict[str, str],
    sink: RecordingSink,
) -> Callable[..., ConfigurationLoader]:
    """按测试上下文构造加载器"""

    def _make(**overrides) -> ConfigurationLoader:
        kwargs = {
            "settings": settings,
            "properties": properties,
            "environ": environ,
            "sink": sink,
        }
        kwargs.update(overrides)
        return ConfigurationLoader(**kwargs)

    return _make
