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
"""Lifecycle protocol for server handles.

Bootstrap only builds server handles; an external lifecycle manager
calls start() and stop() on them.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Lifecycle(Protocol):
    """Standard lifecycle for components that own a listening socket."""

    async def start(self) -> None:
        """Bind the socket and begin accepting connections."""
        ...

    async def stop(self) -> None:
        """Stop accepting connections and release the socket.

        Best-effort; calling stop() on a handle that never started is a no-op.
        """
        ...
