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
"""Flywire — wires a Starlette request container onto an embeddable Uvicorn server."""

from flywire.bootstrap import (
    ContainerResolver,
    Producers,
    ServerBootstrapper,
    bootstrap,
    resolve_context_path,
    resolve_tls_configurator,
)
from flywire.config.properties.server import BootstrapConfig
from flywire.core.config import Config
from flywire.inject.instance import ABSENT, Absent, Instance, Present
from flywire.kernel.exceptions import ConfigurationError

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "Absent",
    "BootstrapConfig",
    "Config",
    "ConfigurationError",
    "ContainerResolver",
    "Instance",
    "Present",
    "Producers",
    "ServerBootstrapper",
    "bootstrap",
    "resolve_context_path",
    "resolve_tls_configurator",
]
