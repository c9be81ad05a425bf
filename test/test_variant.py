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

# ==================================================
# test_variant.py
# Description: Test cases for tagged table entries
# ==================================================

from rng.sampler import Literal, Choice, Thunk, lift, resolve


def test_lift():
    assert isinstance(lift(1), Literal)
    assert isinstance(lift((1, 2)), Literal)
    assert isinstance(lift([1, 2]), Choice)
    assert isinstance(lift(len), Thunk)
    choice = Choice([1])
    assert lift(choice) is choice


def test_literal_draws_nothing(fixed_sampler):
    sampler = fixed_sampler(0)
    assert resolve(Literal([1, 2]), sampler) == [1, 2]
    assert sampler.engine.calls == 0


def test_choice_resolves_nested_entries(fixed_sampler):
    sampler = fixed_sampler(0)
    assert resolve(Choice([[lambda: 'deep'], 'flat']), sampler) == 'deep'
    assert sampler.engine.calls == 2


def test_thunk_result_is_not_resolved_again(fixed_sampler):
    sampler = fixed_sampler(0)
    assert Thunk(lambda: ['a', 'b']).resolve(sampler) == ['a', 'b']
    assert sampler.engine.calls == 0
