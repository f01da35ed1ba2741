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
"""Resolve an optional application descriptor into a request container."""

from __future__ import annotations

import structlog

from flywire.inject.instance import ABSENT, Instance, Present, satisfied
from flywire.web.application import ApplicationDescriptor
from flywire.web.container import StarletteContainer, create_container

logger = structlog.get_logger("flywire.bootstrap")


class ContainerResolver:
    """Creates a :class:`StarletteContainer` when an application is bound."""

    def __init__(self, debug: bool = False) -> None:
        self._debug = debug

    def resolve_container(
        self,
        application_binding: Instance[ApplicationDescriptor] | None,
    ) -> Instance[StarletteContainer]:
        """Return ``Present(container)``, or ``ABSENT`` when no application is bound."""
        logger.debug("ENTRY resolve_container", application_binding=application_binding)
        result: Instance[StarletteContainer]
        if not satisfied(application_binding):
            result = ABSENT
        else:
            assert application_binding is not None
            container = create_container(application_binding.get(), debug=self._debug)
            logger.info("Created StarletteContainer", container=container)
            result = Present(container)
        logger.debug("EXIT resolve_container", result=result)
        return result
