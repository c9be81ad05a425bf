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

# ===========================================================
# composite.py
# Description: Arrays, string blocks and option objects built
#              from other generators
# ===========================================================

import json
from typing import Mapping, Sequence
from rng.sampler import Sampler
from exceptions.exceptions import InvalidArgumentError
from .number import NumberGenerator


class CompositeGenerator:
    """Generator of composite values assembled from table entries."""

    def __init__(self, sampler: Sampler) -> None:
        """
            Initialize the composite generator.

            Parameters:
                sampler (Sampler): The sampler every value is drawn from.
        """
        self.sampler = sampler
        self.number = NumberGenerator(sampler)

    def filled_array(self, fn, limit=None) -> list:
        """Return a list of resolved entries of fn, of length limit or 1 + uniform_int(tiny())."""
        size = limit or self.sampler.uniform_int(self.number.tiny()) + 1
        array = []
        for _ in range(size):
            value = self.sampler.pick_deep(fn)
            if value is not None:
                array.append(value)
        return array

    def _flatten(self, item) -> str:
        if item is None:
            return ''
        if callable(item):
            return str(item())
        if isinstance(item, str):
            return item
        if isinstance(item, list):
            return ''.join(self._flatten(part) for part in item)
        return str(item)

    def block(self, items: Sequence, optional: bool = False) -> str:
        """
            Concatenate the items of a block into one string.

            Nested lists are concatenated in order, producers are invoked and None is dropped.
            An optional block collapses to the empty string once in six draws.
        """
        if optional and self.sampler.chance(6):
            return ''
        return ''.join(self._flatten(item) for item in items)

    def random_options(self, base: Mapping) -> str:
        """Return a JSON object built from a random subset of the keys of base, each with a resolved value."""
        if not isinstance(base, Mapping):
            raise InvalidArgumentError('random_options', base, "received a non-mapping type")
        options = {}
        for key in self.sampler.subset(list(base.keys())):
            options[key] = self.sampler.pick_deep(base[key])
        return json.dumps(options)
