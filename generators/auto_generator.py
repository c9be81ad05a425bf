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

# =========================================================================
# auto_generator.py
# Description: Resolve a dotted generator name ('number.any', 'typed.short')
#              to a zero-argument producer bound to a sampler
# =========================================================================

import importlib
from typing import Any, Callable
from rng.sampler import Sampler

GENERATOR_MAPPING_NAMES = {
    'number': 'generators.number.NumberGenerator',
    'typed': 'generators.typed.TypedGenerator',
    'composite': 'generators.composite.CompositeGenerator',
}

# Public producer names per family, mapped to method names
PRODUCER_NAMES = {
    'number': {
        'bool': 'boolean',
        'float': 'float_value',
        'range': 'range_value',
        'tiny': 'tiny',
        'unsigned': 'unsigned',
        'any': 'any',
    },
    'typed': {
        'byte': 'byte',
        'octet': 'octet',
        'short': 'short',
        'unsigned_short': 'unsigned_short',
        'long': 'long',
        'unsigned_long': 'unsigned_long',
        'float': 'float32',
        'unrestricted_float': 'unrestricted_float32',
        'double': 'double',
        'unrestricted_double': 'unrestricted_double',
        'any': 'any',
    },
}


def generator_name_from_family(family):
    """Get the generator class name from the family name."""
    if family in GENERATOR_MAPPING_NAMES:
        return GENERATOR_MAPPING_NAMES[family]
    else:
        raise ValueError(f"Invalid generator family: {family}")


class AutoGenerator:
    """
        This is a generic generator loader that returns a producer of the library when
        called with the [`AutoGenerator.load`] class method.

        This class cannot be instantiated directly using `__init__()` (throws an error).
    """

    def __init__(self):
        raise EnvironmentError(
            "AutoGenerator is designed to be used "
            "through the `AutoGenerator.load(name, sampler)` method."
        )

    @classmethod
    def load_family(cls, family: str, sampler: Sampler):
        """Instantiate the generator class of a family over the sampler."""
        module_name, class_name = generator_name_from_family(family).rsplit('.', 1)
        module = importlib.import_module(module_name)
        return getattr(module, class_name)(sampler)

    @classmethod
    def load(cls, name: str, sampler: Sampler) -> Callable[[], Any]:
        """Load the producer registered under a dotted name such as 'number.any'."""
        family, _, producer = name.partition('.')
        producers = PRODUCER_NAMES.get(family, {})
        if producer not in producers:
            raise ValueError(f"Invalid generator name: {name}")
        generator = cls.load_family(family, sampler)
        return getattr(generator, producers[producer])

    @classmethod
    def available(cls) -> list:
        """List every registered dotted generator name."""
        return [f"{family}.{producer}" for family, producers in PRODUCER_NAMES.items() for producer in producers]
