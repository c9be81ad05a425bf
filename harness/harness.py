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

# ==============================================================
# harness.py
# Description: Fuzzing harness that owns one seeded engine,
#              persists the seed with every generated batch and
#              saves or restores the engine state between runs
# ==============================================================

import json
import logging
from tqdm import tqdm
from rng.auto_engine import AutoEngine
from rng.sampler import Sampler
from generators.auto_generator import AutoGenerator
from utils.seed_config import SeedConfig
from utils.utils import load_config_file, default_config_path, load_json_as_list, create_directory_for_file
from exceptions.exceptions import AlgorithmNameMismatchError, ConfigurationError, InvalidStateSnapshotError

logger = logging.getLogger(__name__)


class HarnessConfig:
    """Config class for the fuzzing harness, load config file and initialize parameters."""

    def __init__(self, algorithm_config_path: str = None, **kwargs) -> None:
        """
            Initialize the harness configuration.

            Parameters:
                algorithm_config_path (str): Path to the harness configuration file.
                **kwargs: Additional parameters to override config values.
        """
        if algorithm_config_path is None:
            algorithm_config_path = default_config_path(self.algorithm_name())
        self.config_dict = load_config_file(algorithm_config_path)
        if self.config_dict.get('algorithm_name') != self.algorithm_name():
            raise AlgorithmNameMismatchError(self.algorithm_name(), self.config_dict.get('algorithm_name'))

        # Update config with kwargs
        if kwargs:
            self.config_dict.update(kwargs)

        self.initialize_parameters()

    def initialize_parameters(self) -> None:
        self.engine = self.config_dict.get('engine', 'MT19937')
        self.seed_env_var = self.config_dict.get('seed_env_var')
        self.generator = self.config_dict.get('generator', 'number.any')
        self.count = self.config_dict.get('count', 100)
        if not isinstance(self.count, int) or self.count < 0:
            raise ConfigurationError(f"Harness count must be a non-negative integer, got {self.count!r}.")

    def algorithm_name(self) -> str:
        return 'Harness'


class FuzzHarness:
    """
        Fuzzing harness.

        Every batch written by `run` starts with a header record holding the seed of the
        engine, so a failing batch can be regenerated with `replay`.
    """

    def __init__(self, algorithm_config: str = None, seed: int = None, seed_config: SeedConfig = None, **kwargs) -> None:
        """
            Initialize the fuzzing harness.

            Parameters:
                algorithm_config (str): Path to the harness configuration file.
                seed (int): Explicit seed. Ignored when seed_config is given.
                seed_config (SeedConfig): Run-time seed configuration.
                **kwargs: Additional parameters to override harness config values.
        """
        self.config = HarnessConfig(algorithm_config, **kwargs)
        if seed_config is None:
            seed_config = SeedConfig(seed=seed, env_var=self.config.seed_env_var)
        self.engine = AutoEngine.load(self.config.engine, seed_config=seed_config)
        self.sampler = Sampler(self.engine)
        self.show_progress = False
        logger.info("harness ready with %s seeded by %d", self.config.engine, self.seed)

    @property
    def seed(self) -> int:
        return self.engine.seed_value

    def _get_progress_bar(self, iterable):
        """Return an iterable possibly wrapped with a progress bar."""
        if self.show_progress:
            return tqdm(iterable, desc="Generating", leave=True)
        return iterable

    def run(self, generator_name: str = None, count: int = None, output_path: str = None, show_progress: bool = False) -> list:
        """
            Generate a batch of values.

            Parameters:
                generator_name (str): Dotted generator name, e.g. 'number.any'. Defaults to the config value.
                count (int): Number of values. Defaults to the config value.
                output_path (str): When given, the batch is written there as JSON lines.
                show_progress (bool): Whether to show progress bar.

            Returns:
                list: The generated values.
        """
        generator_name = generator_name or self.config.generator
        count = self.config.count if count is None else count
        self.show_progress = show_progress

        header = {'seed': self.seed, 'generator': generator_name, 'count': count}
        producer = AutoGenerator.load(generator_name, self.sampler)
        values = [producer() for _ in self._get_progress_bar(range(count))]

        if output_path is not None:
            create_directory_for_file(output_path)
            with open(output_path, 'w') as f:
                f.write(json.dumps(header) + '\n')
                for index, value in enumerate(values):
                    f.write(json.dumps({'index': index, 'value': value}) + '\n')
            logger.info("wrote %d values of %s to %s", count, generator_name, output_path)
        return values

    def replay(self, batch_path: str, show_progress: bool = False) -> list:
        """
            Reseed from the header of a batch file and regenerate its values.

            The values match the file when the batch was the first one drawn after seeding.
        """
        records = load_json_as_list(batch_path)
        if not records or 'seed' not in records[0]:
            raise ConfigurationError(f"The file '{batch_path}' does not start with a batch header.")
        header = records[0]
        self.sampler.seed(header['seed'])
        logger.info("replaying %s from seed %d", batch_path, header['seed'])
        return self.run(header['generator'], header['count'], show_progress=show_progress)

    def save_state(self, path: str) -> None:
        """Persist the engine snapshot to a JSON file."""
        state, index = self.engine.export_state()
        create_directory_for_file(path)
        with open(path, 'w') as f:
            json.dump({'algorithm_name': self.config.engine, 'state': state, 'index': index}, f)
        logger.info("saved %s state to %s", self.config.engine, path)

    def load_state(self, path: str) -> None:
        """Restore the engine snapshot stored in a JSON file by `save_state`."""
        snapshot = load_config_file(path)
        if snapshot.get('algorithm_name') != self.config.engine:
            raise AlgorithmNameMismatchError(self.config.engine, snapshot.get('algorithm_name'))
        if 'state' not in snapshot or 'index' not in snapshot:
            raise InvalidStateSnapshotError(snapshot, "expected 'state' and 'index' entries")
        self.engine.import_state((snapshot['state'], snapshot['index']))
        logger.info("loaded %s state from %s", self.config.engine, path)
