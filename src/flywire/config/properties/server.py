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
"""HTTP server bootstrap configuration properties."""

from __future__ import annotations

from dataclasses import dataclass

from flywire.core.config import Config, config_properties

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


@config_properties(prefix="flywire.server")
@dataclass(frozen=True)
class BootstrapConfig:
    """Configuration for server bootstrap (flywire.server.*).

    ``context_path`` has no default: when unset, the mount path declared
    by the application is used, then ``/``.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    context_path: str | None = None
    secure: bool = False

    @classmethod
    def from_config(cls, config: Config) -> BootstrapConfig:
        return config.bind(cls)


@config_properties(prefix="flywire.server.ssl")
@dataclass(frozen=True)
class SslProperties:
    """TLS material for secure servers (flywire.server.ssl.*)."""

    certfile: str | None = None
    keyfile: str | None = None
    keyfile_password: str | None = None
    ca_certs: str | None = None
    cert_reqs: int = 0
    ciphers: str = "TLSv1"
