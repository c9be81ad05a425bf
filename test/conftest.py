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
# conftest.py
# Description: Shared fixtures, including an engine that
#              replays a fixed sequence of 32-bit words
# ==========================================================

import pytest
from rng.base import BaseEngine
from rng.sampler import Sampler


class FixedEngine(BaseEngine):
    """Engine cycling through a fixed list of raw words and counting its draws."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def seed(self, s) -> None:
        self.calls = 0

    def next_uint32(self) -> int:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value

    def export_state(self):
        return self.calls

    def import_state(self, snapshot) -> None:
        self.calls = snapshot


@pytest.fixture
def fixed_sampler():
    """Factory building a sampler over a FixedEngine: fixed_sampler(0, 0x80000000, ...)."""
    def build(*values):
        return Sampler(FixedEngine(values))
    return build


@pytest.fixture(autouse=True)
def clear_seed_env(monkeypatch):
    monkeypatch.delenv('FUZZRAND_SEED', raising=False)
