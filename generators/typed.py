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

# ==========================================================
# typed.py
# Description: Values for fixed-width numeric types, coerced
#              through the matching numpy dtype
# ==========================================================

import math
import numpy as np
from rng.sampler import Sampler
from .number import NumberGenerator


def wrap_integer(value: int, dtype) -> int:
    """Wrap an integer into the range of an integer dtype, the way a typed array store does."""
    return np.array(int(value), dtype=np.int64).astype(dtype).item()


class TypedGenerator:
    """Generator of numbers for the WebIDL numeric types (byte, octet, short, ..., unrestricted double)."""

    INTEGER_DTYPES = {
        'byte': np.int8,
        'octet': np.uint8,
        'short': np.int16,
        'unsigned_short': np.uint16,
        'long': np.int32,
        'unsigned_long': np.uint32,
    }

    def __init__(self, sampler: Sampler) -> None:
        """
            Initialize the typed value generator.

            Parameters:
                sampler (Sampler): The sampler every value is drawn from.
        """
        self.sampler = sampler
        self.number = NumberGenerator(sampler)

    def _magnitude(self, limit, default):
        return self.sampler.uniform_int(limit if limit is not None else default)

    def _signed(self, value):
        return -value if self.sampler.chance(10) else value

    def _integer(self, name: str, value: int) -> int:
        return wrap_integer(value, self.INTEGER_DTYPES[name])

    def byte(self, limit=None) -> int:
        return self._integer('byte', self._signed(self._magnitude(limit, 129)))

    def octet(self, limit=None) -> int:
        return self._integer('octet', self._magnitude(limit, 256))

    def short(self, limit=None) -> int:
        return self._integer('short', self._signed(self._magnitude(limit, 32769)))

    def unsigned_short(self, limit=None) -> int:
        return self._integer('unsigned_short', self._magnitude(limit, 65535))

    def long(self, limit=None) -> int:
        return self._integer('long', self._signed(self._magnitude(limit, 2147483649)))

    def unsigned_long(self, limit=None) -> int:
        return self._integer('unsigned_long', self._magnitude(limit, 4294967296))

    def _fraction(self, limit):
        base = self.sampler.uniform_int(limit)
        return base + self.sampler.uniform_float()

    def _signed_fraction(self, limit):
        # The sign is drawn between the integer part and the fraction
        base = self.sampler.uniform_int(limit)
        negate = self.sampler.chance(10)
        value = base + self.sampler.uniform_float()
        return -value if negate else value

    def _non_finite(self) -> float:
        return self.sampler.pick_item([math.nan, math.inf, -math.inf])

    def float32(self, limit=None) -> float:
        """Return a finite single precision value."""
        value = self._signed_fraction(limit)
        return np.float32(value).item()

    def unrestricted_float32(self, limit=None) -> float:
        if self.sampler.chance(100):
            return self._non_finite()
        return np.float32(self._fraction(limit)).item()

    def double(self, limit=None) -> float:
        return float(self._signed_fraction(limit))

    def unrestricted_double(self, limit=None) -> float:
        if self.sampler.chance(100):
            return self._non_finite()
        return float(self._signed_fraction(limit))

    def any(self):
        value = self.sampler.weighted_choose([
            (1, [self.byte, self.octet]),
            (1, [self.short, self.unsigned_short]),
            (1, [self.long, self.unsigned_long]),
            (1, [self.float32, self.unrestricted_float32]),
            (1, [self.double, self.unrestricted_double]),
            (1, [self.number.range_value, self.number.tiny]),
        ])
        return -value if self.sampler.chance(10) else value
