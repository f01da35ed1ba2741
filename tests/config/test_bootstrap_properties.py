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
"""Tests for BootstrapConfig and SslProperties."""

import dataclasses

import pytest

from flywire.config.properties.server import BootstrapConfig, SslProperties
from flywire.core.config import Config


class TestBootstrapConfig:
    def test_default_values(self):
        props = BootstrapConfig()
        assert props.host == "0.0.0.0"
        assert props.port == 8080
        assert props.context_path is None
        assert props.secure is False

    def test_is_immutable(self):
        props = BootstrapConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            props.port = 80  # type: ignore[misc]

    def test_has_config_properties_prefix(self):
        assert BootstrapConfig.__flywire_config_prefix__ == "flywire.server"

    def test_from_config_with_bundled_defaults(self):
        props = BootstrapConfig.from_config(Config.with_defaults())
        assert props == BootstrapConfig()

    def test_from_config_custom_values(self):
        config = Config(
            {"flywire": {"server": {"host": "127.0.0.1", "port": 80, "context-path": "/api", "secure": True}}}
        )
        props = BootstrapConfig.from_config(config)
        assert props == BootstrapConfig(host="127.0.0.1", port=80, context_path="/api", secure=True)

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("FLYWIRE_SERVER_PORT", "9443")
        monkeypatch.setenv("FLYWIRE_SERVER_SECURE", "true")
        monkeypatch.setenv("FLYWIRE_SERVER_CONTEXT_PATH", "/env")
        props = BootstrapConfig.from_config(Config.with_defaults())
        assert props.port == 9443
        assert props.secure is True
        assert props.context_path == "/env"


class TestSslProperties:
    def test_defaults(self):
        props = Config.with_defaults().bind(SslProperties)
        assert props.certfile is None
        assert props.keyfile is None
        assert props.cert_reqs == 0

    def test_dashed_keys(self):
        config = Config({"flywire": {"server": {"ssl": {"certfile": "c.pem", "keyfile-password": "s3cret"}}}})
        props = config.bind(SslProperties)
        assert props.certfile == "c.pem"
        assert props.keyfile_password == "s3cret"
