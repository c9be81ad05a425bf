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

# ====================================================
# number.py
# Description: Numeric values biased towards the edge
#              cases of number parsing and arithmetic
# ====================================================

import math
import sys
from rng.sampler import Sampler

# Smallest positive subnormal and largest finite double
MIN_VALUE = 5e-324
MAX_VALUE = sys.float_info.max


class NumberGenerator:
    """Generator of plain numbers: small powers of two, odd magnitudes and signed mixes."""

    def __init__(self, sampler: Sampler) -> None:
        """
            Initialize the number generator.

            Parameters:
                sampler (Sampler): The sampler every value is drawn from.
        """
        self.sampler = sampler

    def boolean(self) -> bool:
        return self.sampler.boolean()

    def float_value(self) -> float:
        """Return a float, usually in [0, 1) and once in 32 draws from an extreme magnitude scheme."""
        if self.sampler.chance(32):
            scheme = self.sampler.uniform_int(4)
            if scheme == 0:
                return self.sampler.inclusive_range(MIN_VALUE, MAX_VALUE)
            elif scheme == 1:
                return 10 ** 1 / 10 ** self.sampler.uniform_int(307)
            elif scheme == 2:
                return 2 ** (self.sampler.uniform_float() * self.sampler.uniform_float() * 64)
            else:
                numerator = 10 ** self.sampler.inclusive_range(1, 9)
                return numerator / 10 ** self.sampler.inclusive_range(1, 9)
        # Reserved for further schemes, the draw keeps streams aligned
        self.sampler.uniform_int(6)
        return self.sampler.uniform_float()

    def range_value(self) -> int:
        return self.sampler.pick_deep([1, 2, 3, 4, 6, 8, 16, 32, 64, self.tiny])

    def tiny(self) -> int:
        """Return a power of two in [1, 2048]."""
        return 2 ** self.sampler.uniform_int(12)

    def unsigned(self):
        if self.sampler.chance(2):
            return abs(self.any())
        return 2 ** self.sampler.uniform_int(self.sampler.uniform_int(65)) + self.sampler.uniform_int(3) - 1

    def even(self, number):
        """Round a positive odd number up to the next even one. Negative odd numbers are returned unchanged."""
        return number + 1 if math.fmod(number, 2) == 1 else number

    def any(self):
        value = self.sampler.weighted_choose([
            (10, self.float_value),
            (10, [self.range_value, self.tiny]),
            (1, self.unsigned),
        ])
        return -value if self.sampler.chance(10) else value
