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
"""Flywire exception hierarchy.

Absence of an optional collaborator is never an error; the only fatal
condition during bootstrap is a bind address that cannot be formed.
"""

from __future__ import annotations

# =============================================================================
# Base Exception
# =============================================================================


class FlywireException(Exception):
    """Base exception for all Flywire errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "BOOTSTRAP_CONFIGURATION").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Injection Exceptions
# =============================================================================


class UnsatisfiedBindingError(FlywireException, LookupError):
    """A value was requested from a binding point that resolved to nothing."""

    def __init__(self, bound_type: str | None = None) -> None:
        target = f" for '{bound_type}'" if bound_type else ""
        super().__init__(
            message=f"Binding point{target} is unsatisfied",
            code="BINDING_UNSATISFIED",
        )


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(FlywireException):
    """Infrastructure failures: server creation, network binding."""


class ConfigurationError(InfrastructureException):
    """Bootstrap inputs cannot form a valid bind address.

    Always fatal to the current bootstrap attempt. The underlying syntax
    violation is chained as ``__cause__``.
    """

    def __init__(
        self,
        reason: str,
        *,
        host: str | None = None,
        port: int | None = None,
        path: str | None = None,
    ) -> None:
        self.reason = reason
        super().__init__(
            message=f"Cannot bootstrap HTTP server: {reason}",
            code="BOOTSTRAP_CONFIGURATION",
            context={"host": host, "port": port, "path": path},
        )
