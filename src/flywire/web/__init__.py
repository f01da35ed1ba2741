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
"""Flywire web — application descriptors and the Starlette request container."""

from flywire.web.application import (
    Application,
    ApplicationDescriptor,
    ResourceConfig,
    application_path,
    mount_path_of,
)
from flywire.web.container import StarletteContainer, create_container

__all__ = [
    "Application",
    "ApplicationDescriptor",
    "ResourceConfig",
    "StarletteContainer",
    "application_path",
    "create_container",
    "mount_path_of",
]
