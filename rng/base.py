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

# ===============================================================
# base.py
# Description: This is a generic engine class that will be
#              inherited by the bit engines of the library.
# ===============================================================

from utils.utils import load_config_file, default_config_path
from utils.seed_config import SeedConfig
from exceptions.exceptions import AlgorithmNameMismatchError


class BaseEngineConfig:
    """Base configuration class for bit engines."""

    def __init__(self, algorithm_config_path: str = None, seed_config: SeedConfig = None, *args, **kwargs) -> None:
        """
        Initialize the base configuration.

        Parameters:
            algorithm_config_path (str): Path to the algorithm configuration file.
            seed_config (SeedConfig): Run-time seed configuration.
            **kwargs: Additional parameters to override config values
        """
        if algorithm_config_path is None:
            algorithm_config_path = default_config_path(self.algorithm_name())
        self.config_dict = load_config_file(algorithm_config_path)
        if self.config_dict.get('algorithm_name') != self.algorithm_name():
            raise AlgorithmNameMismatchError(self.algorithm_name(), self.config_dict.get('algorithm_name'))

        # Update config with kwargs
        if kwargs:
            self.config_dict.update(kwargs)

        self.seed_config = seed_config if seed_config is not None else SeedConfig()
        if self.seed_config.engine_kwargs:
            self.config_dict.update(self.seed_config.engine_kwargs)

        # Initialize algorithm-specific parameters
        self.initialize_parameters()

    def initialize_parameters(self) -> None:
        """Initialize algorithm-specific parameters. Should be overridden by subclasses."""
        raise NotImplementedError

    def algorithm_name(self) -> str:
        """Return the algorithm name. Should be overridden by subclasses."""
        raise NotImplementedError


class BaseEngine:
    """Interface shared by every bit engine: a reproducible stream of 32-bit words."""

    def seed(self, s) -> None:
        raise NotImplementedError

    def next_uint32(self) -> int:
        raise NotImplementedError

    def next_float53(self) -> float:
        """Return a float in [0, 1) with 53-bit precision built from two raw draws."""
        a = self.next_uint32() >> 5
        b = self.next_uint32() >> 6
        return (a * 67108864.0 + b) / 9007199254740992.0

    def export_state(self):
        raise NotImplementedError

    def import_state(self, snapshot) -> None:
        raise NotImplementedError
