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
"""HTTP server handle backed by Uvicorn.

A handle is created unstarted. The lifecycle manager that owns it calls
:meth:`HttpServer.start` / :meth:`HttpServer.stop` (or :meth:`HttpServer.serve`
for a blocking run).
"""

from __future__ import annotations

import asyncio
from typing import Any
from urllib.parse import unquote

import structlog
import uvicorn
from starlette.applications import Starlette
from starlette.routing import Mount
from starlette.types import ASGIApp

from flywire.server.tls import TlsConfigurator
from flywire.server.types import ServerInfo
from flywire.server.uri import BindURI
from flywire.web.container import StarletteContainer

logger = structlog.get_logger("flywire.server")


class HttpServer:
    """An embeddable HTTP server bound to a :class:`BindURI`.

    ``container`` may be ``None``; the server then answers 404 to every
    request. TLS options are applied only when ``secure`` is set and a
    configurator is present.
    """

    def __init__(
        self,
        uri: BindURI,
        container: StarletteContainer | None,
        secure: bool = False,
        tls_configurator: TlsConfigurator | None = None,
        log_level: str = "warning",
    ) -> None:
        self._uri = uri
        self._container = container
        self._secure = secure
        self._tls_configurator = tls_configurator
        self._log_level = log_level
        self._asgi_app: ASGIApp | None = None
        self._server: uvicorn.Server | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def uri(self) -> BindURI:
        return self._uri

    @property
    def container(self) -> StarletteContainer | None:
        return self._container

    @property
    def secure(self) -> bool:
        return self._secure

    @property
    def tls_configurator(self) -> TlsConfigurator | None:
        return self._tls_configurator

    @property
    def is_started(self) -> bool:
        return self._server is not None and self._server.started

    @property
    def asgi_app(self) -> ASGIApp:
        """The container, mounted under the context path when it is not ``/``."""
        if self._asgi_app is None:
            self._asgi_app = self._build_asgi_app()
        return self._asgi_app

    def _build_asgi_app(self) -> ASGIApp:
        if self._container is None:
            return Starlette()
        mount = unquote(self._uri.context_path).rstrip("/")
        if not mount:
            return self._container
        return Starlette(routes=[Mount(mount, app=self._container)])

    def build_config(self) -> uvicorn.Config:
        kwargs: dict[str, Any] = {
            "host": self._uri.bind_host,
            "port": self._uri.port,
            "log_level": self._log_level,
        }
        if self._secure and self._tls_configurator is not None:
            kwargs.update(self._tls_configurator.uvicorn_options())
        return uvicorn.Config(self.asgi_app, **kwargs)

    def _get_server(self) -> uvicorn.Server:
        if self._server is None:
            self._server = uvicorn.Server(self.build_config())
        return self._server

    def serve(self) -> None:
        """Run the server until shutdown (blocking)."""
        logger.info("Starting HttpServer", uri=str(self._uri), secure=self._secure)
        self._get_server().run()

    async def start(self) -> None:
        """Start serving in a background task and wait until listening.

        Raises:
            RuntimeError: the server exited before it was listening, e.g.
                the address is in use (Uvicorn reports this with ``sys.exit``).
        """
        if self._task is not None and not self._task.done():
            return
        server = self._get_server()
        server.should_exit = False
        task = asyncio.create_task(self._serve_guarded(server))
        self._task = task
        while not server.started:
            if task.done():
                self._task = None
                self._server = None
                task.result()
                raise RuntimeError(f"HttpServer exited during startup: {self._uri}")
            await asyncio.sleep(0.01)
        logger.info("HttpServer started", uri=str(self._uri), secure=self._secure)

    async def _serve_guarded(self, server: uvicorn.Server) -> None:
        # SystemExit would otherwise escape the event loop and end the process.
        try:
            await server.serve()
        except SystemExit as exc:
            logger.error("HttpServer exited", uri=str(self._uri), exit_code=exc.code)
            raise RuntimeError(f"HttpServer exited during startup: {self._uri}") from exc

    async def stop(self) -> None:
        if self._task is None:
            return
        self.shutdown()
        await self._task
        self._task = None
        self._server = None
        logger.info("HttpServer stopped", uri=str(self._uri))

    def shutdown(self) -> None:
        """Request graceful shutdown."""
        if self._server is not None:
            self._server.should_exit = True

    @property
    def server_info(self) -> ServerInfo:
        return ServerInfo(
            name="uvicorn",
            version=self._get_version(),
            host=self._uri.bind_host,
            port=self._uri.port,
            context_path=self._uri.context_path,
            secure=self._secure,
            started=self.is_started,
        )

    @staticmethod
    def _get_version() -> str:
        try:
            from importlib.metadata import version

            return version("uvicorn")
        except Exception:
            return "unknown"

    def __repr__(self) -> str:
        return f"HttpServer(uri='{self._uri}', secure={self._secure}, started={self.is_started})"


def create_http_server(
    uri: BindURI,
    container: StarletteContainer | None,
    secure: bool = False,
    tls_configurator: TlsConfigurator | None = None,
) -> HttpServer:
    """Create an unstarted :class:`HttpServer`."""
    return HttpServer(uri, container, secure=secure, tls_configurator=tls_configurator)
