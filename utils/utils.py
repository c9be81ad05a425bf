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

# ==============================
# utils.py
# Description: Utility functions
# ==============================

import os
import json
from exceptions.exceptions import ConfigurationError

CONFIG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'config')


def default_config_path(algorithm_name: str) -> str:
    """Return the path of the bundled configuration file for the given algorithm name."""
    return os.path.join(CONFIG_DIR, f'{algorithm_name}.json')


def load_config_file(path: str) -> dict:
    """Load a JSON configuration file from the specified path and return it as a dictionary."""
    try:
        with open(path, 'r') as f:
            config_dict = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"The file '{path}' does not exist.")
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Error decoding JSON in '{path}': {e}")

    if not isinstance(config_dict, dict):
        raise ConfigurationError(f"The file '{path}' does not contain a JSON object.")
    return config_dict


def load_json_as_list(input_file: str) -> list:
    """Load a JSON lines file as a list of dictionaries."""
    res = []
    with open(input_file, 'r') as f:
        lines = f.readlines()
    for line in lines:
        if line.strip():
            res.append(json.loads(line))
    return res


def create_directory_for_file(file_path) -> None:
    """Create the directory for the specified file path if it does not already exist."""
    directory = os.path.dirname(file_path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory)
