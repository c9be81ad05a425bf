# Copyright 2024 THU-BPM MarkLLM.
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

# ==================================================================
# variant.py
# Description: Tagged table entries (literal, choice, thunk) and the
#              recursive resolver used by Sampler.pick_deep
# ==================================================================

from typing import Any, Callable, Sequence


class Variant:
    """Base class for table entries that resolve to a value through a sampler."""

    def resolve(self, sampler) -> Any:
        raise NotImplementedError


class Literal(Variant):
    """A value returned unchanged."""

    def __init__(self, value: Any) -> None:
        self.value = value

    def resolve(self, sampler) -> Any:
        return self.value

    def __repr__(self) -> str:
        return f"Literal({self.value!r})"


class Choice(Variant):
    """A list of options, one of which is picked uniformly and resolved in turn."""

    def __init__(self, options: Sequence) -> None:
        self.options = options

    def resolve(self, sampler) -> Any:
        return resolve(sampler.pick_item(self.options), sampler)

    def __repr__(self) -> str:
        return f"Choice({self.options!r})"


class Thunk(Variant):
    """A zero-argument producer, invoked only when the entry is resolved."""

    def __init__(self, fn: Callable[[], Any]) -> None:
        self.fn = fn

    def resolve(self, sampler) -> Any:
        # The producer's result is returned as is, not resolved again
        return self.fn()

    def __repr__(self) -> str:
        return f"Thunk({self.fn!r})"


def lift(value: Any) -> Variant:
    """Wrap a raw table entry: callables become thunks, lists become choices, anything else a literal."""
    if isinstance(value, Variant):
        return value
    if callable(value):
        return Thunk(value)
    if isinstance(value, list):
        return Choice(value)
    return Literal(value)


def resolve(value: Any, sampler) -> Any:
    """Resolve a variant or a raw table entry to a concrete value."""
    return lift(value).resolve(sampler)
