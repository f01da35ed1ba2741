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
"""Flywire server — bind URI, TLS configurator and the Uvicorn server handle."""

from flywire.server.http_server import HttpServer, create_http_server
from flywire.server.tls import TlsConfigurator
from flywire.server.types import ServerInfo
from flywire.server.uri import BindURI, build_bind_uri

__all__ = [
    "BindURI",
    "HttpServer",
    "ServerInfo",
    "TlsConfigurator",
    "build_bind_uri",
    "create_http_server",
]
