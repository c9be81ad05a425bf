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

# ===========================================================
# test_generators.py
# Description: Test cases for number, typed and composite
#              generators and the generator loader
# ===========================================================

import json
import math
import numpy as np
import pytest
from rng.sampler import Sampler
from generators import NumberGenerator, TypedGenerator, CompositeGenerator, AutoGenerator
from generators.typed import wrap_integer
from exceptions.exceptions import InvalidArgumentError


def test_tiny_and_range_value():
    number = NumberGenerator(Sampler.from_seed(1))
    powers = {2 ** i for i in range(12)}
    for _ in range(500):
        assert number.tiny() in powers
        assert number.range_value() in powers | {3, 6}


def test_float_value_draw_order(fixed_sampler):
    # chance(32) fails, then uniform_int(6) and two words for the float
    sampler = fixed_sampler(0)
    assert NumberGenerator(sampler).float_value() == 0.0
    assert sampler.engine.calls == 4


def test_float_value_is_finite():
    number = NumberGenerator(Sampler.from_seed(2))
    for _ in range(2000):
        value = number.float_value()
        assert math.isfinite(value) and value >= 0


def test_even():
    number = NumberGenerator(Sampler.from_seed(3))
    assert number.even(3) == 4
    assert number.even(4) == 4
    assert number.even(-3) == -3
    assert number.even(-4) == -4


def test_number_any_is_reproducible():
    first = NumberGenerator(Sampler.from_seed(4))
    second = NumberGenerator(Sampler.from_seed(4))
    assert [first.any() for _ in range(300)] == [second.any() for _ in range(300)]


def test_wrap_integer():
    assert wrap_integer(300, np.uint8) == 44
    assert wrap_integer(128, np.int8) == -128
    assert wrap_integer(-1, np.uint16) == 65535
    assert wrap_integer(2 ** 31, np.int32) == -2 ** 31


@pytest.mark.parametrize('name, low, high', [
    ('byte', -128, 127),
    ('octet', 0, 255),
    ('short', -32768, 32767),
    ('unsigned_short', 0, 65535),
    ('long', -2 ** 31, 2 ** 31 - 1),
    ('unsigned_long', 0, 2 ** 32 - 1),
])
def test_typed_integers_stay_in_range(name, low, high):
    typed = TypedGenerator(Sampler.from_seed(5))
    for _ in range(500):
        value = getattr(typed, name)()
        assert isinstance(value, int)
        assert low <= value <= high


def test_typed_limit():
    typed = TypedGenerator(Sampler.from_seed(6))
    assert all(0 <= typed.octet(4) < 4 for _ in range(100))


def test_float32_rounding():
    typed = TypedGenerator(Sampler.from_seed(7))
    for _ in range(200):
        value = typed.float32(100)
        assert float(np.float32(value)) == value
        assert -101 < value < 101


def test_unrestricted_double_non_finite(fixed_sampler):
    # uniform_int(100) == 1, then index 0 of [nan, inf, -inf]
    sampler = fixed_sampler(42949672, 0)
    assert math.isnan(TypedGenerator(sampler).unrestricted_double())


def test_signed_float_draw_order(fixed_sampler):
    # Integer part 1 from uniform_int(4), then chance(10) == 1, then a zero fraction
    sampler = fixed_sampler(0x40000000, 429496729, 0, 0)
    assert TypedGenerator(sampler).double(4) == -1.0
    assert sampler.engine.calls == 4

    sampler = fixed_sampler(0x40000000, 429496729, 0, 0)
    assert TypedGenerator(sampler).float32(4) == -1.0
    assert sampler.engine.calls == 4

    # chance(100) fails first, then the same sequence
    sampler = fixed_sampler(0, 0x40000000, 429496729, 0, 0)
    assert TypedGenerator(sampler).unrestricted_double(4) == -1.0
    assert sampler.engine.calls == 5


def test_restricted_values_are_finite():
    typed = TypedGenerator(Sampler.from_seed(8))
    for _ in range(1000):
        assert math.isfinite(typed.double())
        assert math.isfinite(typed.float32())


def test_typed_any_is_reproducible():
    first = TypedGenerator(Sampler.from_seed(9))
    second = TypedGenerator(Sampler.from_seed(9))
    a = [first.any() for _ in range(300)]
    b = [second.any() for _ in range(300)]
    assert [str(v) for v in a] == [str(v) for v in b]


def test_filled_array():
    composite = CompositeGenerator(Sampler.from_seed(10))
    assert composite.filled_array(lambda: 1, 5) == [1, 1, 1, 1, 1]
    assert composite.filled_array(lambda: None, 3) == []
    array = composite.filled_array(['a', 'b'])
    assert 1 <= len(array) <= 2048
    assert set(array) <= {'a', 'b'}


def test_block(fixed_sampler):
    composite = CompositeGenerator(fixed_sampler(0))
    assert composite.block(['a', ['b', 'c'], None, lambda: 1]) == 'abc1'
    # uniform_int(6) == 1 collapses an optional block
    assert CompositeGenerator(fixed_sampler(715827882)).block(['a'], optional=True) == ''
    assert composite.block(['a'], optional=True) == 'a'


def test_random_options():
    composite = CompositeGenerator(Sampler.from_seed(11))
    base = {'mode': ['fast', 'slow'], 'depth': 3}
    for _ in range(50):
        options = json.loads(composite.random_options(base))
        assert set(options) <= set(base)
        assert options.get('mode', 'fast') in ('fast', 'slow')
    with pytest.raises(InvalidArgumentError):
        composite.random_options(['mode'])


def test_auto_generator():
    sampler = Sampler.from_seed(12)
    short = AutoGenerator.load('typed.short', sampler)
    assert all(-32768 <= short() <= 32767 for _ in range(100))
    assert 'number.any' in AutoGenerator.available()
    for name in ['number.nope', 'nope', 'composite.block']:
        with pytest.raises(ValueError):
            AutoGenerator.load(name, sampler)
    with pytest.raises(EnvironmentError):
        AutoGenerator()
