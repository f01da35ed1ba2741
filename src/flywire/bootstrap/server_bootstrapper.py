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
"""Compute the effective bind URI and build the HTTP server handle.

Context path precedence, highest first:

1. ``flywire.server.context_path`` when set and non-empty
2. the mount path declared by the container's application
3. ``/``
"""

from __future__ import annotations

import structlog

from flywire.config.properties.server import BootstrapConfig
from flywire.inject.instance import ABSENT, Absent, Instance, Present, satisfied
from flywire.kernel.exceptions import ConfigurationError
from flywire.server.http_server import HttpServer, create_http_server
from flywire.server.tls import TlsConfigurator
from flywire.server.uri import BindURI, build_bind_uri
from flywire.web.application import mount_path_of
from flywire.web.container import StarletteContainer

logger = structlog.get_logger("flywire.bootstrap")

DEFAULT_CONTEXT_PATH = "/"


def resolve_context_path(explicit_path: str | None, container: StarletteContainer | None) -> str:
    if explicit_path:
        return explicit_path
    if container is None:
        return DEFAULT_CONTEXT_PATH
    declared = mount_path_of(container.configuration)
    return declared or DEFAULT_CONTEXT_PATH


def resolve_tls_configurator(
    secure: bool,
    binding: Instance[TlsConfigurator] | None,
) -> Present[TlsConfigurator] | Absent:
    if not secure or not satisfied(binding):
        return ABSENT
    assert binding is not None
    return Present(binding.get())


def resolve_bind_uri(host: str, port: int, context_path: str) -> BindURI:
    """Build the bind URI, raising :class:`ConfigurationError` on bad parts."""
    try:
        return build_bind_uri(host, port, context_path)
    except ValueError as exc:
        raise ConfigurationError(str(exc), host=host, port=port, path=context_path) from exc


class ServerBootstrapper:
    """Builds an unstarted :class:`HttpServer` from configuration and bindings."""

    def __init__(self, config: BootstrapConfig | None = None) -> None:
        self._config = config or BootstrapConfig()

    @property
    def config(self) -> BootstrapConfig:
        return self._config

    def bootstrap(
        self,
        container_binding: Instance[StarletteContainer] | None,
        tls_binding: Instance[TlsConfigurator] | None = None,
    ) -> Present[HttpServer] | Absent:
        """Return ``Present(server)``, or ``ABSENT`` when no container is bound.

        Raises:
            ConfigurationError: host, port and context path do not form a
                valid bind URI.
        """
        config = self._config
        logger.debug(
            "ENTRY bootstrap",
            host=config.host,
            port=config.port,
            context_path=config.context_path,
            secure=config.secure,
            container_binding=container_binding,
            tls_binding=tls_binding,
        )
        if not satisfied(container_binding):
            logger.debug("EXIT bootstrap", result=ABSENT)
            return ABSENT

        assert container_binding is not None
        container = container_binding.get()
        if container is None:
            logger.warning("No StarletteContainer present")
        context_path = resolve_context_path(config.context_path, container)

        uri = resolve_bind_uri(config.host, config.port, context_path)
        tls = resolve_tls_configurator(config.secure, tls_binding)

        server = create_http_server(uri, container, secure=config.secure, tls_configurator=tls.or_else(None))
        logger.info("Created HttpServer", server=server)

        result = Present(server)
        logger.debug("EXIT bootstrap", result=result)
        return result


def bootstrap(
    config: BootstrapConfig,
    container_binding: Instance[StarletteContainer] | None,
    tls_binding: Instance[TlsConfigurator] | None = None,
) -> Present[HttpServer] | Absent:
    """Functional form of :meth:`ServerBootstrapper.bootstrap`."""
    return ServerBootstrapper(config).bootstrap(container_binding, tls_binding)
