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
"""TLS configurator: certificate material handed to the server engine."""

from __future__ import annotations

import ssl
from dataclasses import dataclass
from typing import Any

from flywire.config.properties.server import SslProperties
from flywire.core.config import Config
from flywire.inject.instance import ABSENT, Instance, Present


@dataclass(frozen=True)
class TlsConfigurator:
    """Certificate chain, key and verification settings for a secure server."""

    certfile: str
    keyfile: str | None = None
    keyfile_password: str | None = None
    ca_certs: str | None = None
    cert_reqs: int = ssl.CERT_NONE
    ciphers: str = "TLSv1"

    @classmethod
    def from_properties(cls, props: SslProperties) -> Instance[TlsConfigurator]:
        """ABSENT when no certificate file is configured."""
        if not props.certfile:
            return ABSENT
        return Present(
            cls(
                certfile=props.certfile,
                keyfile=props.keyfile,
                keyfile_password=props.keyfile_password,
                ca_certs=props.ca_certs,
                cert_reqs=props.cert_reqs,
                ciphers=props.ciphers,
            )
        )

    @classmethod
    def from_config(cls, config: Config) -> Instance[TlsConfigurator]:
        return cls.from_properties(config.bind(SslProperties))

    def uvicorn_options(self) -> dict[str, Any]:
        """Keyword arguments for ``uvicorn.Config``."""
        options: dict[str, Any] = {
            "ssl_certfile": self.certfile,
            "ssl_cert_reqs": self.cert_reqs,
            "ssl_ciphers": self.ciphers,
        }
        if self.keyfile:
            options["ssl_keyfile"] = self.keyfile
        if self.keyfile_password:
            options["ssl_keyfile_password"] = self.keyfile_password
        if self.ca_certs:
            options["ssl_ca_certs"] = self.ca_certs
        return options

    def __repr__(self) -> str:
        return f"TlsConfigurator(certfile={self.certfile!r}, keyfile={self.keyfile!r})"
