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

# ===================================================
# mersenne.py
# Description: Implementation of Mersenne Twister RNG
# ===================================================

import logging
import numbers
from ..base import BaseEngine, BaseEngineConfig
from utils.seed_config import wall_clock_seed
from exceptions.exceptions import InvalidStateSnapshotError

logger = logging.getLogger(__name__)

N = 624
M = 397
UPPER_MASK = 0x80000000
LOWER_MASK = 0x7fffffff
MAG01 = (0, 0x9908b0df)

# Cursor value of an engine whose vector has never been filled
INDEX_UNINITIALIZED = N + 1


class MersenneConfig(BaseEngineConfig):
    """Config class for the MT19937 engine, load config file and initialize parameters."""

    def initialize_parameters(self) -> None:
        self.default_seed = self.config_dict.get('seed')
        self.seed = self.seed_config.resolve(fallback=self.default_seed)

    def algorithm_name(self) -> str:
        return 'MT19937'


class MersenneRNG(BaseEngine):
    """Mersenne Twister RNG implementation."""

    def __init__(self, seed: int = None):
        """
            Initialize the Mersenne Twister RNG.

            Parameters:
                seed (int): Seed for the RNG. Derived from the wall clock when omitted.
        """
        self.state = [0] * N
        self.f = 1812433253
        self.u = 11
        self.s = 7
        self.b = 0x9D2C5680
        self.t = 15
        self.c = 0xEFC60000
        self.l = 18
        self.index = INDEX_UNINITIALIZED
        self.seed_value = None

        self.seed(wall_clock_seed() if seed is None else seed)

    @classmethod
    def from_config(cls, config: MersenneConfig) -> "MersenneRNG":
        """Build an engine seeded from a loaded configuration."""
        return cls(config.seed)

    def int_32(self, number: int) -> int:
        """Return 32-bit integer."""
        return int(0xFFFFFFFF & number)

    def seed(self, s) -> None:
        """Reset the state vector from a 32-bit seed."""
        s = self.int_32(int(s))
        self.seed_value = s
        self.state[0] = s
        for i in range(1, N):
            self.state[i] = self.int_32(self.f * (self.state[i - 1] ^ (self.state[i - 1] >> 30)) + i)
        # The next draw regenerates the whole vector
        self.index = N
        logger.debug("seeded MT19937 with %d", s)

    def twist(self) -> None:
        """Twist the RNG."""
        for i in range(N):
            temp = (self.state[i] & UPPER_MASK) | (self.state[(i + 1) % N] & LOWER_MASK)
            self.state[i] = self.state[(i + M) % N] ^ (temp >> 1) ^ MAG01[temp & 0x1]
        self.index = 0

    def next_uint32(self) -> int:
        """Return the next tempered 32-bit unsigned integer."""
        if self.index >= N:
            self.twist()
        y = self.state[self.index]
        self.index += 1

        # Tempering
        y = y ^ (y >> self.u)
        y = y ^ ((y << self.s) & self.b)
        y = y ^ ((y << self.t) & self.c)
        y = y ^ (y >> self.l)
        return self.int_32(y)

    def export_state(self) -> tuple:
        """Return an opaque (state, index) snapshot of the engine."""
        return list(self.state), self.index

    def import_state(self, snapshot) -> None:
        """Replace the engine state with a snapshot produced by export_state."""
        try:
            state, index = snapshot
        except (TypeError, ValueError):
            raise InvalidStateSnapshotError(snapshot)
        self._check_index(index)
        self.import_mta(state)
        self.index = int(index)
        logger.debug("imported MT19937 state at index %d", self.index)

    def export_mta(self) -> list:
        """Return a copy of the state vector alone."""
        return list(self.state)

    def import_mta(self, words) -> None:
        """Replace the state vector, keeping the cursor."""
        try:
            words = [self.int_32(int(w)) for w in words]
        except (TypeError, ValueError):
            raise InvalidStateSnapshotError(words, "received a non-integer state vector")
        if len(words) != N:
            raise InvalidStateSnapshotError(words, f"expected {N} state words, got {len(words)}")
        self.state = words

    def export_mti(self) -> int:
        """Return the cursor alone."""
        return self.index

    def _check_index(self, index) -> None:
        if isinstance(index, bool) or not isinstance(index, numbers.Integral) or not 0 <= index <= INDEX_UNINITIALIZED:
            raise InvalidStateSnapshotError(index, f"expected an index in [0, {INDEX_UNINITIALIZED}]")

    def import_mti(self, index) -> None:
        """Replace the cursor, keeping the state vector."""
        self._check_index(index)
        self.index = int(index)
