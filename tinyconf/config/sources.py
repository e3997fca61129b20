"""
配置来源 - 判定位置类型并打开字节流

判定规则：
- 匹配 ^[a-zA-Z]{2,}:/.* 的视为 URL
- 否则先按内置资源查找，资源不存在时按文件系统路径打开

所有打开失败均以 OSError（含 requests.RequestException / URLError）抛出，由加载器记录。
"""

from __future__ import annotations

import io
import re
import urllib.request
from importlib import resources
from typing import BinaryIO
from urllib.parse import urlsplit

import requests

from ..models import ConfigurationSource, SourceKind

URL_PATTERN = re.compile(r"[a-zA-Z]{2,}:/.*")


def is_url(location: str) -> bool:
    """是否为 URL（至少两个字母的 scheme 后接 ":/"）"""
    return URL_PATTERN.fullmatch(location) is not None


def classify(location: str) -> SourceKind:
    """判定位置类型（资源与文件的区分需在打开时确定，这里统一返回 RESOURCE）"""
    return SourceKind.URL if is_url(location) else SourceKind.RESOURCE


def open_url(url: str) -> BinaryIO:
    """打开 URL（http/https 走 requests，其余 scheme 交给 urllib）"""
    scheme = urlsplit(url).scheme.lower()
    if scheme in ("http", "https"):
        response = requests.get(url)
        response.raise_for_status()
        return io.BytesIO(response.content)
    return urllib.request.urlopen(url)


def open_resource(package: str, name: str) -> BinaryIO | None:
    """打开内置资源，包或资源不存在时返回 None"""
    try:
        root = resources.files(package)
    except ModuleNotFoundError:
        return None

    # 绝对路径与 ".." 不按资源查找，交由文件路径处理
    if name.startswith("/") or ".." in name.split("/"):
        return None
    parts = [part for part in name.split("/") if part]
    if not parts:
        return None
    resource = root.joinpath(*parts)
    if not resource.is_file():
        return None
    return resource.open("rb")


def open_file(path: str) -> BinaryIO:
    return open(path, "rb")


def open_source(location: str, package: str) -> tuple[ConfigurationSource, BinaryIO]:
    """
    按 URL -> 内置资源 -> 文件 的顺序打开配置

    Args:
        location: 覆盖属性给出的位置
        package: 内置资源所在的包

    Returns:
        (来源描述, 二进制流)

    Raises:
        OSError: 无法打开
    """
    if classify(location) is SourceKind.URL:
        return ConfigurationSource(kind=SourceKind.URL, location=location), open_url(location)

    stream = open_resource(package, location)
    if stream is not None:
        return ConfigurationSource(kind=SourceKind.RESOURCE, location=location), stream

    return ConfigurationSource(kind=SourceKind.FILE, location=location), open_file(location)
