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
"""Producers: wire both bootstrap steps from a single :class:`Config`.

Intended for registration in an external DI container; each producer
takes the binding points that container resolved.
"""

from __future__ import annotations

from flywire.bootstrap.container_resolver import ContainerResolver
from flywire.bootstrap.server_bootstrapper import ServerBootstrapper
from flywire.config.properties.server import BootstrapConfig
from flywire.core.config import Config
from flywire.core.value import Value
from flywire.inject.instance import Absent, Instance, Present
from flywire.server.http_server import HttpServer
from flywire.server.tls import TlsConfigurator
from flywire.web.application import ApplicationDescriptor
from flywire.web.container import StarletteContainer


class _FromConfig:
    def __repr__(self) -> str:
        return "FROM_CONFIG"


FROM_CONFIG = _FromConfig()


class Producers:
    """Producer methods for an external DI container, configured from one :class:`Config`.

    ``produce_container`` and ``produce_http_server`` take the binding
    points that container resolved; ``None`` always means "unbound".
    """

    def __init__(self, config: Config) -> None:
        self._config = config
        debug = Value("${flywire.web.debug:false}").resolve(config, bool)
        self._container_resolver = ContainerResolver(debug=debug)
        self._bootstrapper = ServerBootstrapper(BootstrapConfig.from_config(config))

    @property
    def bootstrap_config(self) -> BootstrapConfig:
        return self._bootstrapper.config

    def produce_container(
        self,
        application_binding: Instance[ApplicationDescriptor] | None,
    ) -> Instance[StarletteContainer]:
        return self._container_resolver.resolve_container(application_binding)

    def produce_http_server(
        self,
        container_binding: Instance[StarletteContainer] | None,
        tls_binding: Instance[TlsConfigurator] | None | _FromConfig = FROM_CONFIG,
    ) -> Present[HttpServer] | Absent:
        """Bootstrap a server.

        When *tls_binding* is omitted it is read from ``flywire.server.ssl.*``.
        """
        if isinstance(tls_binding, _FromConfig):
            tls_binding = TlsConfigurator.from_config(self._config)
        return self._bootstrapper.bootstrap(container_binding, tls_binding)

    def produce(self, application_binding: Instance[ApplicationDescriptor] | None) -> Present[HttpServer] | Absent:
        """Both steps: application binding straight to a server handle."""
        return self.produce_http_server(self.produce_container(application_binding))
