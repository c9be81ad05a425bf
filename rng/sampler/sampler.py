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

# ====================================================================
# sampler.py
# Description: Sampling library built exclusively on a 32-bit engine:
#              uniform integers and floats, ranges, item selection,
#              weighted choice, shuffling, subsets and hex strings
# ====================================================================

import math
import numbers
from typing import Any, Mapping, Sequence
from ..base import BaseEngine
from ..mersenne import MersenneRNG
from .variant import Choice, resolve
from exceptions.exceptions import InvalidArgumentError


def to_uint32(value) -> int:
    """Truncate towards zero and wrap modulo 2**32. NaN and infinities map to 0."""
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return int(value) & 0xFFFFFFFF


def as_double(value) -> float:
    """Convert a number to a float, saturating integers too large for a double."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def is_number(value) -> bool:
    """Return True for real numbers other than booleans and NaN."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def is_sized_sequence(value) -> bool:
    """Return True for indexable, sized collections that are not strings or mappings."""
    if value is None or isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return hasattr(value, '__len__') and hasattr(value, '__getitem__')


class Sampler:
    """
        Sampling operations over an injected bit engine.

        Every operation draws from `self.engine` only, so two samplers over identically
        seeded engines return identical results for identical call sequences.
    """

    def __init__(self, engine: BaseEngine) -> None:
        """
            Initialize the sampler.

            Parameters:
                engine (BaseEngine): A seeded engine. The sampler never creates one on its own.
        """
        if engine is None:
            raise InvalidArgumentError('Sampler', engine, "requires a seeded engine")
        self.engine = engine

    @classmethod
    def from_seed(cls, seed: int = None) -> "Sampler":
        """Build a sampler over a fresh MT19937 engine. The wall clock seeds it when seed is None."""
        return cls(MersenneRNG(seed))

    def seed(self, value) -> None:
        """Reinitialize the underlying stream."""
        self.engine.seed(value)

    def export_state(self):
        return self.engine.export_state()

    def import_state(self, snapshot) -> None:
        self.engine.import_state(snapshot)

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def uniform_int(self, limit=None) -> int:
        """
            Return an integer in [0, limit) with exact uniformity.

            The biased tail of the 32-bit range is rejected, so the result is never
            `raw % limit`. A limit of 0 returns 0 and None means 0xFFFFFFFF.
        """
        if limit is None:
            limit = 0xFFFFFFFF
        if not is_number(limit):
            raise InvalidArgumentError('uniform_int', limit, "received a non number type")
        if limit == 0:
            return 0

        limit = as_double(limit)
        x = to_uint32(0x100000000 / limit)
        y = to_uint32(x * limit)
        r = self.engine.next_uint32()
        while y and r >= y:
            r = self.engine.next_uint32()
        if x == 0:
            return 0
        return r // x

    def uniform_float(self) -> float:
        """Return a float in [0, 1)."""
        return self.engine.next_float53()

    def inclusive_range(self, start, limit):
        """Return an integer in [start, limit]."""
        for bound in (start, limit):
            if not is_number(bound) or not math.isfinite(bound):
                raise InvalidArgumentError('inclusive_range', (start, limit), "received a non number type")
        return self.uniform_int(limit - start + 1) + start

    def log_uniform(self, limit) -> float:
        """Return a float in [1, limit] whose logarithm is uniformly distributed."""
        if not is_number(limit) or limit <= 0:
            raise InvalidArgumentError('log_uniform', limit, "expects a positive number")
        return math.exp(self.uniform_float() * math.log(limit))

    def chance(self, limit=2) -> bool:
        """Return True with probability 1/limit, i.e. when uniform_int(limit) draws exactly 1."""
        if limit is None:
            limit = 2
        if not is_number(limit):
            raise InvalidArgumentError('chance', limit, "received a non number type")
        return self.uniform_int(limit) == 1

    def boolean(self) -> bool:
        return self.pick_item([True, False])

    def hex_string(self, digits) -> str:
        """Return a random lowercase hex string of at most `digits` digits, without zero padding."""
        if not is_number(digits):
            raise InvalidArgumentError('hex_string', digits, "received a non number type")
        return format(self.uniform_int(2 ** (digits * 4)), 'x')

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def pick_item(self, seq: Sequence) -> Any:
        """Return a uniformly chosen element of seq."""
        if not is_sized_sequence(seq):
            raise InvalidArgumentError('pick_item', seq, "received an invalid object")
        if len(seq) == 0:
            raise InvalidArgumentError('pick_item', seq, "received an empty sequence")
        return seq[self.uniform_int(len(seq))]

    def pick_key(self, mapping: Mapping) -> Any:
        """Return a uniformly chosen key of mapping, in iteration order."""
        if not isinstance(mapping, Mapping):
            raise InvalidArgumentError('pick_key', mapping, "received a non-mapping type")
        return self.pick_item(list(mapping.keys()))

    def pick_deep(self, value) -> Any:
        """Resolve a table entry: call a thunk, pick from a list and resolve the pick, return anything else."""
        return resolve(value, self)

    def use(self, value) -> Any:
        """Return value or an empty string with equal probability."""
        return value if self.boolean() else ''

    def weighted_choose(self, entries: Sequence, flat: bool = False) -> Any:
        """
            Choose among (weight, value) pairs with probability proportional to weight.

            Parameters:
                entries (Sequence): Ordered (weight, value) pairs.
                flat (bool): Return the chosen value as is instead of resolving it with pick_deep.
        """
        if not isinstance(entries, (list, tuple)):
            raise InvalidArgumentError('weighted_choose', entries, "received a non-array type")
        if not entries:
            raise InvalidArgumentError('weighted_choose', entries, "received an empty array")

        total = 0
        for weight, _ in entries:
            total += weight
        n = self.uniform_int(total)
        for weight, value in entries:
            if n < weight:
                return value if flat else self.pick_deep([value])
            n = n - weight

        # Unreachable while the weights sum to total
        value = entries[0][1]
        return value if flat else self.pick_deep([value])

    def expand_weighted(self, entries: Sequence) -> list:
        """Expand (weight, value) pairs into a list holding each value weight times."""
        expanded = []
        for weight, value in entries:
            copies = 0
            while copies < weight:
                expanded.append(value)
                copies += 1
        return expanded

    def shuffle_in_place(self, seq) -> None:
        """Fisher-Yates shuffle, from the last position down to the first."""
        if isinstance(seq, tuple) or not is_sized_sequence(seq) or not hasattr(seq, '__setitem__'):
            raise InvalidArgumentError('shuffle_in_place', seq, "received an immutable or non-array type")
        for i in range(len(seq) - 1, -1, -1):
            p = self.uniform_int(i + 1)
            seq[i], seq[p] = seq[p], seq[i]

    def shuffled_copy(self, seq: Sequence) -> list:
        """Return a shuffled shallow copy of seq."""
        if not is_sized_sequence(seq):
            raise InvalidArgumentError('shuffled_copy', seq, "received a non-array type")
        copy = list(seq)
        self.shuffle_in_place(copy)
        return copy

    def subset(self, seq: Sequence, count=None) -> list:
        """
            Return `count` independent picks from seq, with replacement.

            When count is not a number it is drawn from [0, len(seq)]. A NaN count returns an empty list.
        """
        if not isinstance(seq, (list, tuple)):
            raise InvalidArgumentError('subset', seq, "received a non-array type")
        # NaN is a count that yields no picks
        if isinstance(count, bool) or not isinstance(count, numbers.Real):
            count = self.uniform_int(len(seq) + 1)

        choice = Choice(seq)
        result = []
        while len(result) < count:
            result.append(self.pick_deep(choice))
        return result

    def random_pop(self, seq: list) -> Any:
        """Remove and return a uniformly chosen element of seq."""
        if not is_sized_sequence(seq) or not hasattr(seq, 'pop'):
            raise InvalidArgumentError('random_pop', seq, "received a non-array type")
        if len(seq) == 0:
            raise InvalidArgumentError('random_pop', seq, "cannot pop from an empty array")
        return seq.pop(self.uniform_int(len(seq)))
