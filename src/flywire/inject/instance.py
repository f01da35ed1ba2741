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
"""Binding points: handles that resolve to zero or one collaborator.

A binding point is either :data:`ABSENT` (no provider matched) or
:class:`Present` wrapping the resolved value. The wrapped value may itself
be ``None`` when a provider resolved but produced nothing; callers that
care distinguish the two cases explicitly.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, Union, final

from flywire.kernel.exceptions import UnsatisfiedBindingError

T = TypeVar("T")
U = TypeVar("U")


@final
class Absent:
    """An unsatisfied binding point. Use the :data:`ABSENT` singleton."""

    _instance: Absent | None = None

    def __new__(cls) -> Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_unsatisfied(self) -> bool:
        return True

    def is_present(self) -> bool:
        return False

    def get(self) -> Any:
        raise UnsatisfiedBindingError()

    def or_else(self, default: U) -> U:
        return default

    def map(self, fn: Callable[[Any], Any]) -> Absent:
        return self

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent()


@final
@dataclass(frozen=True)
class Present(Generic[T]):
    """A satisfied binding point holding exactly one resolved value."""

    value: T

    def is_unsatisfied(self) -> bool:
        return False

    def is_present(self) -> bool:
        return True

    def get(self) -> T:
        return self.value

    def or_else(self, default: Any) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> Present[U]:
        return Present(fn(self.value))

    def __bool__(self) -> bool:
        return True


Instance = Union[Present[T], Absent]


def satisfied(binding: Instance[T] | None) -> bool:
    """True when *binding* is non-``None`` and resolved to a provider."""
    return binding is not None and not binding.is_unsatisfied()


class BeanResolver(Protocol):
    """Anything that resolves a type to an instance (a DI container)."""

    def resolve(self, cls: type[T]) -> T: ...


def instance_of(
    resolver: BeanResolver,
    cls: type[T],
    missing: tuple[type[BaseException], ...] = (LookupError,),
) -> Instance[T]:
    """Adapt an external container lookup into a binding point.

    Errors listed in *missing* mean "no provider" and yield :data:`ABSENT`;
    any other error propagates.
    """
    try:
        return Present(resolver.resolve(cls))
    except missing:
        return ABSENT
