# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Effective bind URI: the address and path a server listens on."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass
from urllib.parse import quote

PLACEHOLDER_SCHEME = "ignored"

_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
_HOSTNAME_RE = re.compile(rf"^(?:{_LABEL}\.)*{_LABEL}\.?$")
_DOTTED_NUMERIC_RE = re.compile(r"^[0-9.]+$")

# RFC 3986 pchar plus "/" as segment separator; "%" is always quoted.
_PATH_SAFE = "/@:!$&'()*+,;=-._~"


@dataclass(frozen=True)
class BindURI:
    """Host, port and context path of a server; the scheme is a placeholder.

    Build with :func:`build_bind_uri`, which validates and normalizes.
    """

    host: str
    port: int
    path: str
    scheme: str = PLACEHOLDER_SCHEME

    @property
    def authority(self) -> str:
        return f"{self.host}:{self.port}"

    @property
    def bind_host(self) -> str:
        """Host as a socket bind address (IPv6 brackets removed)."""
        return self.host[1:-1] if self.host.startswith("[") else self.host

    @property
    def context_path(self) -> str:
        return self.path or "/"

    def __str__(self) -> str:
        return f"{self.scheme}://{self.authority}{self.path}"


def build_bind_uri(host: str, port: int, path: str | None) -> BindURI:
    """Validate the components and build a :class:`BindURI`.

    Raises:
        ValueError: the host is not a valid hostname or IP literal, the port
            is outside 0-65535, or the path is relative.
    """
    return BindURI(host=_normalize_host(host), port=_check_port(port), path=_normalize_path(path))


def _normalize_host(host: str) -> str:
    if not host:
        raise ValueError("Expected host")
    if ":" in host or host.startswith("["):
        literal = host[1:-1] if host.startswith("[") and host.endswith("]") else host
        try:
            ipaddress.IPv6Address(literal)
        except ValueError:
            raise ValueError(f"Malformed IPv6 address at host: {host!r}") from None
        return f"[{literal}]"
    if _DOTTED_NUMERIC_RE.match(host):
        try:
            ipaddress.IPv4Address(host)
        except ValueError:
            raise ValueError(f"Malformed IPv4 address at host: {host!r}") from None
        return host
    if not _HOSTNAME_RE.match(host):
        raise ValueError(f"Illegal character in hostname: {host!r}")
    last_label = host.rstrip(".").rsplit(".", 1)[-1]
    if not last_label[0].isalpha():
        raise ValueError(f"Hostname must end with a label starting with a letter: {host!r}")
    return host


def _check_port(port: int) -> int:
    if isinstance(port, bool) or not isinstance(port, int):
        raise ValueError(f"Port must be an integer, got {port!r}")
    if not 0 <= port <= 65535:
        raise ValueError(f"Port out of range: {port}")
    return port


def _normalize_path(path: str | None) -> str:
    if not path:
        return ""
    if not path.startswith("/"):
        raise ValueError(f"Relative path in absolute URI: {path!r}")
    return quote(path, safe=_PATH_SAFE)
