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

# ===========================================
# seed_config.py
# Description: Run-time seed configuration
# ===========================================

import os
import time
from exceptions.exceptions import ConfigurationError

DEFAULT_SEED_ENV_VAR = 'FUZZRAND_SEED'


def wall_clock_seed() -> int:
    """Return a 32-bit seed derived from the current time in milliseconds."""
    return int(time.time() * 1000) & 0xFFFFFFFF


class SeedConfig:
    """Configuration class for seeding an engine at run time."""

    def __init__(self, seed=None, env_var: str = DEFAULT_SEED_ENV_VAR, *args, **kwargs):
        """
            Initialize the seed configuration.

            Parameters:
                seed (int): Explicit seed. Takes precedence over everything else.
                env_var (str): Name of the environment variable consulted when no seed is given.
                kwargs: Additional keyword arguments forwarded to the engine config.
        """
        self.seed = seed
        self.env_var = env_var
        self.engine_kwargs = {}
        self.engine_kwargs.update(kwargs)

    def seed_from_env(self):
        """Return the seed stored in the environment, or None when it is unset."""
        if not self.env_var:
            return None
        raw = os.environ.get(self.env_var)
        if raw is None or raw.strip() == '':
            return None
        try:
            return int(raw.strip(), 0)
        except ValueError:
            raise ConfigurationError(f"Environment variable {self.env_var} must hold an integer seed, got '{raw}'.")

    def resolve(self, fallback=None) -> int:
        """Resolve the seed: explicit seed, then environment, then fallback, then wall clock."""
        if self.seed is not None:
            return int(self.seed) & 0xFFFFFFFF
        env_seed = self.seed_from_env()
        if env_seed is not None:
            return env_seed & 0xFFFFFFFF
        if fallback is not None:
            return int(fallback) & 0xFFFFFFFF
        return wall_clock_seed()
