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

# ============================================================
# test_mersenne.py
# Description: Test cases for the MT19937 engine and loaders
# ============================================================

import pytest
from rng.mersenne import MersenneRNG
from rng.auto_engine import AutoEngine
from utils.seed_config import SeedConfig
from exceptions.exceptions import InvalidStateSnapshotError

SEED_0_OUTPUTS = [2357136044, 2546248239, 3071714933, 3626093760, 2588848963,
                  3684848379, 2340255427, 3638918503, 1819583497, 2678185683]
SEED_5489_OUTPUTS = [3499211612, 581869302, 3890346734, 3586334585, 545404204,
                     4161255391, 3922919429, 949333985, 2715962298, 1323567403]


def test_reference_stream_seed_0():
    rng = MersenneRNG(0)
    assert [rng.next_uint32() for _ in range(10)] == SEED_0_OUTPUTS


def test_reference_stream_seed_5489():
    rng = MersenneRNG(5489)
    assert [rng.next_uint32() for _ in range(10)] == SEED_5489_OUTPUTS


def test_ten_thousandth_output():
    rng = MersenneRNG(5489)
    for _ in range(9999):
        rng.next_uint32()
    assert rng.next_uint32() == 4123659995


def test_next_float53():
    rng = MersenneRNG(0)
    assert rng.next_float53() == 0.5488135039273248
    assert rng.next_float53() == 0.7151893663724195


def test_float53_in_unit_interval():
    rng = MersenneRNG(99)
    for _ in range(2000):
        value = rng.next_float53()
        assert 0.0 <= value < 1.0


def test_reseed_restarts_stream():
    rng = MersenneRNG(0)
    for _ in range(700):
        rng.next_uint32()
    rng.seed(0)
    assert rng.index == 624
    assert rng.next_uint32() == SEED_0_OUTPUTS[0]


def test_seed_is_reduced_to_32_bits():
    assert MersenneRNG(2 ** 32).next_uint32() == SEED_0_OUTPUTS[0]
    assert MersenneRNG(2 ** 32 + 5489).seed_value == 5489


def test_wall_clock_seed_is_recorded():
    rng = MersenneRNG()
    assert 0 <= rng.seed_value <= 0xFFFFFFFF


def test_state_round_trip():
    rng = MersenneRNG(1234)
    for _ in range(700):
        rng.next_uint32()
    snapshot = rng.export_state()
    expected = [rng.next_uint32() for _ in range(1000)]

    other = MersenneRNG(1)
    other.import_state(snapshot)
    assert [other.next_uint32() for _ in range(1000)] == expected


def test_snapshot_is_a_copy():
    rng = MersenneRNG(1)
    state, index = rng.export_state()
    state[0] = 0
    assert rng.export_mta()[0] == 1


def test_import_rejects_malformed_snapshots():
    rng = MersenneRNG(3)
    with pytest.raises(InvalidStateSnapshotError):
        rng.import_state(None)
    with pytest.raises(InvalidStateSnapshotError):
        rng.import_state(([0] * 10, 0))
    with pytest.raises(InvalidStateSnapshotError):
        rng.import_state((['a'] * 624, 0))


def test_invalid_index_leaves_state_untouched():
    rng = MersenneRNG(3)
    before = rng.export_state()
    with pytest.raises(InvalidStateSnapshotError):
        rng.import_state(([7] * 624, 626))
    with pytest.raises(InvalidStateSnapshotError):
        rng.import_state(([7] * 624, True))
    assert rng.export_state() == before


def test_partial_state_accessors():
    rng = MersenneRNG(42)
    rng.next_uint32()
    other = MersenneRNG(0)
    other.import_mta(rng.export_mta())
    other.import_mti(rng.export_mti())
    assert other.next_uint32() == rng.next_uint32()
    with pytest.raises(InvalidStateSnapshotError):
        other.import_mti(-1)


def test_auto_engine_load():
    engine = AutoEngine.load('MT19937', seed_config=SeedConfig(seed=5489))
    assert isinstance(engine, MersenneRNG)
    assert engine.next_uint32() == SEED_5489_OUTPUTS[0]


def test_auto_engine_errors():
    with pytest.raises(ValueError):
        AutoEngine.load('XorShift')
    with pytest.raises(EnvironmentError):
        AutoEngine()


if __name__ == '__main__':
    test_reference_stream_seed_0()
    test_reference_stream_seed_5489()
    test_ten_thousandth_output()
    test_next_float53()
