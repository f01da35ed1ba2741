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
"""Application descriptors: user-supplied definitions of a web application.

A descriptor supplies routes and middleware and may declare the path it
wants to be mounted under::

    @application_path("/v2")
    class OrdersApi(Application):
        def routes(self) -> list[BaseRoute]:
            return [Route("/orders", list_orders)]
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol, TypeVar, runtime_checkable

from starlette.middleware import Middleware
from starlette.routing import BaseRoute

T = TypeVar("T", bound=type)

_APPLICATION_PATH_ATTR = "__flywire_application_path__"


def application_path(path: str) -> Callable[[T], T]:
    """Declare the mount path of an :class:`Application` subclass.

    Subclasses inherit the declaration; the nearest declaration wins.
    """

    def decorator(cls: T) -> T:
        setattr(cls, _APPLICATION_PATH_ATTR, path)
        return cls

    return decorator


def declared_application_path(cls: type) -> str | None:
    return getattr(cls, _APPLICATION_PATH_ATTR, None)


@runtime_checkable
class ApplicationDescriptor(Protocol):
    """What a request container needs from an application definition."""

    def routes(self) -> Sequence[BaseRoute]: ...

    def middleware(self) -> Sequence[Middleware]: ...

    def declared_mount_path(self) -> str | None: ...


class Application:
    """Base class for application descriptors.

    Override :meth:`routes` (and optionally :meth:`middleware`); decorate
    with :func:`application_path` to declare a mount path.
    """

    def routes(self) -> Sequence[BaseRoute]:
        return []

    def middleware(self) -> Sequence[Middleware]:
        return []

    def declared_mount_path(self) -> str | None:
        return declared_application_path(type(self))


class ResourceConfig(Application):
    """Resource-config wrapper: its own routes plus an optional nested application.

    Routes and middleware of the nested application come first. The mount
    path is the wrapper's own declaration if it has one, otherwise
    whatever the nested application declares.
    """

    def __init__(
        self,
        application: ApplicationDescriptor | None = None,
        routes: Sequence[BaseRoute] | None = None,
        middleware: Sequence[Middleware] | None = None,
    ) -> None:
        self._application = application
        self._routes = list(routes or [])
        self._middleware = list(middleware or [])

    @property
    def application(self) -> ApplicationDescriptor | None:
        return self._application

    def register(self, *routes: BaseRoute) -> ResourceConfig:
        self._routes.extend(routes)
        return self

    def routes(self) -> Sequence[BaseRoute]:
        nested = list(self._application.routes()) if self._application is not None else []
        return nested + self._routes

    def middleware(self) -> Sequence[Middleware]:
        nested = list(self._application.middleware()) if self._application is not None else []
        return nested + self._middleware

    def declared_mount_path(self) -> str | None:
        own = declared_application_path(type(self))
        if own is not None:
            return own
        return mount_path_of(self._application)

    def __repr__(self) -> str:
        return f"ResourceConfig(application={self._application!r}, routes={len(self._routes)})"


def mount_path_of(configuration: object | None) -> str | None:
    """The mount path *configuration* declares, or ``None``.

    Objects without a ``declared_mount_path`` capability declare nothing.
    """
    if configuration is None:
        return None
    declared = getattr(configuration, "declared_mount_path", None)
    if not callable(declared):
        return None
    return declared()
