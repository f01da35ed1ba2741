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
"""Tests for context path resolution, TLS resolution and server bootstrap."""

import pytest
from structlog.testing import capture_logs

from flywire.bootstrap.server_bootstrapper import (
    ServerBootstrapper,
    bootstrap,
    resolve_bind_uri,
    resolve_context_path,
    resolve_tls_configurator,
)
from flywire.config.properties.server import BootstrapConfig
from flywire.inject import ABSENT, Present
from flywire.kernel.exceptions import ConfigurationError
from flywire.server.http_server import HttpServer
from flywire.server.tls import TlsConfigurator
from flywire.web.application import Application, ResourceConfig, application_path
from flywire.web.container import create_container


class PlainApi(Application):
    pass


@application_path("/v2")
class VersionedApi(Application):
    pass


@application_path("")
class EmptyPathApi(Application):
    pass


TLS = TlsConfigurator(certfile="cert.pem", keyfile="key.pem")


class TestResolveContextPath:
    @pytest.mark.parametrize(
        "container",
        [None, create_container(PlainApi()), create_container(VersionedApi())],
    )
    def test_explicit_path_always_wins(self, container):
        assert resolve_context_path("/api", container) == "/api"

    def test_no_path_no_container(self):
        assert resolve_context_path(None, None) == "/"

    def test_empty_explicit_path_is_ignored(self):
        assert resolve_context_path("", create_container(VersionedApi())) == "/v2"

    def test_declared_path(self):
        assert resolve_context_path(None, create_container(VersionedApi())) == "/v2"

    def test_declared_path_through_resource_config(self):
        assert resolve_context_path(None, create_container(ResourceConfig(VersionedApi()))) == "/v2"

    def test_undeclared_path(self):
        assert resolve_context_path(None, create_container(PlainApi())) == "/"

    def test_empty_declared_path(self):
        assert resolve_context_path(None, create_container(EmptyPathApi())) == "/"

    def test_container_without_configuration(self):
        assert resolve_context_path(None, create_container(None)) == "/"  # type: ignore[arg-type]


class TestResolveTlsConfigurator:
    @pytest.mark.parametrize("binding", [None, ABSENT, Present(TLS)])
    def test_not_secure_is_always_absent(self, binding):
        assert resolve_tls_configurator(False, binding) is ABSENT

    @pytest.mark.parametrize("binding", [None, ABSENT])
    def test_secure_unsatisfied_is_absent(self, binding):
        assert resolve_tls_configurator(True, binding) is ABSENT

    def test_secure_satisfied(self):
        assert resolve_tls_configurator(True, Present(TLS)) == Present(TLS)


class TestResolveBindUri:
    def test_wraps_syntax_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_bind_uri("bad host", 8080, "/")
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert exc_info.value.context["host"] == "bad host"

    def test_relative_context_path(self):
        with pytest.raises(ConfigurationError):
            resolve_bind_uri("localhost", 8080, "api")


class TestBootstrap:
    @pytest.mark.parametrize("binding", [None, ABSENT])
    @pytest.mark.parametrize("config", [BootstrapConfig(), BootstrapConfig(host="bad host", secure=True)])
    def test_absent_container_binding_builds_nothing(self, binding, config):
        assert bootstrap(config, binding, Present(TLS)) is ABSENT

    def test_default_scenario(self):
        result = bootstrap(BootstrapConfig(), Present(create_container(PlainApi())), Present(TLS))
        assert isinstance(result, Present)
        server = result.get()
        assert isinstance(server, HttpServer)
        assert server.uri.authority == "0.0.0.0:8080"
        assert server.uri.context_path == "/"
        assert server.secure is False
        assert server.tls_configurator is None

    def test_declared_path_used(self):
        server = bootstrap(BootstrapConfig(), Present(create_container(VersionedApi()))).get()
        assert server.uri.path == "/v2"

    def test_explicit_path_overrides_declared(self):
        config = BootstrapConfig(context_path="/api")
        server = bootstrap(config, Present(create_container(VersionedApi()))).get()
        assert server.uri.path == "/api"

    def test_secure_with_tls(self):
        config = BootstrapConfig(host="127.0.0.1", port=8443, secure=True)
        server = bootstrap(config, Present(create_container(PlainApi())), Present(TLS)).get()
        assert server.secure is True
        assert server.tls_configurator is TLS

    def test_secure_without_tls_still_builds(self):
        config = BootstrapConfig(secure=True)
        server = bootstrap(config, Present(create_container(PlainApi())), ABSENT).get()
        assert server.secure is True
        assert server.tls_configurator is None

    def test_bad_host_fails(self):
        with pytest.raises(ConfigurationError):
            bootstrap(BootstrapConfig(host="bad host"), Present(create_container(PlainApi())))

    def test_port_out_of_range_fails(self):
        with pytest.raises(ConfigurationError):
            bootstrap(BootstrapConfig(port=70000), Present(create_container(PlainApi())))

    def test_empty_container_warns_and_proceeds(self):
        with capture_logs() as logs:
            result = bootstrap(BootstrapConfig(context_path="/x"), Present(None))
        server = result.get()
        assert server.container is None
        assert server.uri.path == "/x"
        warnings = [entry for entry in logs if entry["log_level"] == "warning"]
        assert [w["event"] for w in warnings] == ["No StarletteContainer present"]

    def test_empty_container_defaults_to_root(self):
        assert bootstrap(BootstrapConfig(), Present(None)).get().uri.context_path == "/"

    def test_logs_creation(self):
        with capture_logs() as logs:
            bootstrap(BootstrapConfig(), Present(create_container(PlainApi())))
        assert "Created HttpServer" in [entry["event"] for entry in logs]

    def test_idempotent_uri(self):
        binding = Present(create_container(VersionedApi()))
        first = bootstrap(BootstrapConfig(), binding).get()
        second = bootstrap(BootstrapConfig(), binding).get()
        assert first.uri == second.uri
        assert first is not second


class TestServerBootstrapper:
    def test_default_config(self):
        assert ServerBootstrapper().config == BootstrapConfig()

    def test_bootstrap_uses_config(self):
        bootstrapper = ServerBootstrapper(BootstrapConfig(host="localhost", port=9000))
        server = bootstrapper.bootstrap(Present(create_container(PlainApi()))).get()
        assert server.uri.authority == "localhost:9000"
