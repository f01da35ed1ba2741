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
"""Tests for application descriptors and declared mount paths."""

from starlette.responses import PlainTextResponse
from starlette.routing import Route

from flywire.web.application import (
    Application,
    ApplicationDescriptor,
    ResourceConfig,
    application_path,
    mount_path_of,
)


async def hello(request):
    return PlainTextResponse("hello")


@application_path("/v2")
class VersionedApi(Application):
    def routes(self):
        return [Route("/hello", hello)]


class InheritsPath(VersionedApi):
    pass


@application_path("/v3")
class OverridesPath(VersionedApi):
    pass


class Undeclared(Application):
    pass


@application_path("/wrapped")
class AnnotatedConfig(ResourceConfig):
    pass


class LegacyDescriptor:
    """Has routes but no mount path capability."""

    def routes(self):
        return []


class TestApplicationPath:
    def test_declared(self):
        assert VersionedApi().declared_mount_path() == "/v2"

    def test_inherited(self):
        assert InheritsPath().declared_mount_path() == "/v2"

    def test_nearest_declaration_wins(self):
        assert OverridesPath().declared_mount_path() == "/v3"

    def test_undeclared(self):
        assert Undeclared().declared_mount_path() is None

    def test_satisfies_descriptor_protocol(self):
        assert isinstance(VersionedApi(), ApplicationDescriptor)


class TestResourceConfig:
    def test_unwraps_nested_application(self):
        assert ResourceConfig(VersionedApi()).declared_mount_path() == "/v2"

    def test_own_declaration_wins(self):
        assert AnnotatedConfig(VersionedApi()).declared_mount_path() == "/wrapped"

    def test_empty_wrapper(self):
        assert ResourceConfig().declared_mount_path() is None

    def test_nested_wrapper_continues_walk(self):
        assert ResourceConfig(ResourceConfig(VersionedApi())).declared_mount_path() == "/v2"

    def test_routes_nested_first(self):
        extra = Route("/extra", hello)
        config = ResourceConfig(VersionedApi(), routes=[extra])
        paths = [r.path for r in config.routes()]
        assert paths == ["/hello", "/extra"]

    def test_register_is_chainable(self):
        config = ResourceConfig().register(Route("/a", hello), Route("/b", hello))
        assert [r.path for r in config.routes()] == ["/a", "/b"]

    def test_exposes_application(self):
        api = VersionedApi()
        assert ResourceConfig(api).application is api


class TestMountPathOf:
    def test_none(self):
        assert mount_path_of(None) is None

    def test_without_capability(self):
        assert mount_path_of(LegacyDescriptor()) is None
        assert mount_path_of(object()) is None

    def test_with_capability(self):
        assert mount_path_of(VersionedApi()) == "/v2"
