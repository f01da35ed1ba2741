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
"""Request container: binds an application descriptor to ASGI dispatch."""

from __future__ import annotations

from typing import Any

from starlette.applications import Starlette
from starlette.types import Receive, Scope, Send

from flywire.web.application import ApplicationDescriptor


class StarletteContainer:
    """ASGI callable that dispatches requests to an application descriptor.

    The Starlette app is built on first use from the descriptor's routes
    and middleware; :meth:`reload` discards it so the next request
    rebuilds it.
    """

    def __init__(self, application: ApplicationDescriptor, debug: bool = False) -> None:
        self._application = application
        self._debug = debug
        self._app: Starlette | None = None

    @property
    def configuration(self) -> ApplicationDescriptor:
        """The application descriptor this container serves."""
        return self._application

    @property
    def app(self) -> Starlette:
        if self._app is None:
            self._app = Starlette(
                debug=self._debug,
                routes=list(self._application.routes()),
                middleware=list(self._application.middleware()),
            )
        return self._app

    def reload(self, application: ApplicationDescriptor | None = None) -> None:
        if application is not None:
            self._application = application
        self._app = None

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.app(scope, receive, send)

    def __repr__(self) -> str:
        return f"StarletteContainer(configuration={self._application!r})"


def create_container(application: ApplicationDescriptor, **kwargs: Any) -> StarletteContainer:
    """Create a request container adapting *application*."""
    return StarletteContainer(application, **kwargs)
