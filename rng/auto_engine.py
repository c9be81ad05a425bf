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
# auto_engine.py
# Description: This is a generic engine class that will be instantiated
#              as one of the bit engines of the library when created
#              with the [`AutoEngine.load`] class method.
# =========================================================================

import importlib
from utils.seed_config import SeedConfig

ENGINE_MAPPING_NAMES = {
    'MT19937': ('rng.mersenne.MersenneRNG', 'rng.mersenne.MersenneConfig'),
}


def engine_name_from_alg_name(name):
    """Get the engine and config class names from the algorithm name."""
    if name in ENGINE_MAPPING_NAMES:
        return ENGINE_MAPPING_NAMES[name]
    else:
        raise ValueError(f"Invalid algorithm name: {name}")


def _import_class(dotted_name):
    module_name, class_name = dotted_name.rsplit('.', 1)
    module = importlib.import_module(module_name)
    return getattr(module, class_name)


class AutoEngine:
    """
        This is a generic engine class that will be instantiated as one of the bit engines of the library when
        created with the [`AutoEngine.load`] class method.

        This class cannot be instantiated directly using `__init__()` (throws an error).
    """

    def __init__(self):
        raise EnvironmentError(
            "AutoEngine is designed to be instantiated "
            "using the `AutoEngine.load(algorithm_name, algorithm_config, seed_config)` method."
        )

    @classmethod
    def load_config(cls, algorithm_name: str, algorithm_config: str = None, seed_config: SeedConfig = None, **kwargs):
        """Load the configuration class for the specified engine."""
        _, config_name = engine_name_from_alg_name(algorithm_name)
        config_class = _import_class(config_name)
        return config_class(algorithm_config, seed_config, **kwargs)

    @classmethod
    def load(cls, algorithm_name: str = 'MT19937', algorithm_config: str = None, seed_config: SeedConfig = None, **kwargs):
        """
        Load a seeded engine instance based on the algorithm name.

        Args:
            algorithm_name (str): The name of the engine algorithm
            algorithm_config (str): Path to the algorithm configuration file
            seed_config (SeedConfig): Run-time seed configuration
            **kwargs: Additional keyword arguments overriding config values

        Returns:
            The seeded engine instance
        """
        engine_name, _ = engine_name_from_alg_name(algorithm_name)
        engine_class = _import_class(engine_name)
        engine_config = cls.load_config(algorithm_name, algorithm_config, seed_config, **kwargs)
        return engine_class.from_config(engine_config)
