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
"""Flywire bootstrap — container resolution and server bootstrapping."""

from flywire.bootstrap.container_resolver import ContainerResolver
from flywire.bootstrap.producers import Producers
from flywire.bootstrap.server_bootstrapper import (
    ServerBootstrapper,
    bootstrap,
    resolve_bind_uri,
    resolve_context_path,
    resolve_tls_configurator,
)

__all__ = [
    "ContainerResolver",
    "Producers",
    "ServerBootstrapper",
    "bootstrap",
    "resolve_bind_uri",
    "resolve_context_path",
    "resolve_tls_configurator",
]
