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
"""Tests for the Flywire exception hierarchy."""

from flywire.kernel.exceptions import (
    ConfigurationError,
    FlywireException,
    InfrastructureException,
    UnsatisfiedBindingError,
)


class TestFlywireException:
    def test_basic_creation(self):
        exc = FlywireException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_context_defaults_to_empty_dict(self):
        exc = FlywireException("test")
        exc.context["key"] = "value"
        assert FlywireException("test2").context == {}


class TestConfigurationError:
    def test_is_infrastructure(self):
        assert issubclass(ConfigurationError, InfrastructureException)
        assert issubclass(ConfigurationError, FlywireException)

    def test_carries_bind_components(self):
        exc = ConfigurationError("Illegal character in hostname", host="bad host", port=8080, path="/")
        assert exc.code == "BOOTSTRAP_CONFIGURATION"
        assert exc.reason == "Illegal character in hostname"
        assert exc.context == {"host": "bad host", "port": 8080, "path": "/"}
        assert "Illegal character in hostname" in str(exc)


class TestUnsatisfiedBindingError:
    def test_is_lookup_error(self):
        assert issubclass(UnsatisfiedBindingError, LookupError)

    def test_message_names_type(self):
        exc = UnsatisfiedBindingError("TlsConfigurator")
        assert "TlsConfigurator" in str(exc)
        assert exc.code == "BINDING_UNSATISFIED"
