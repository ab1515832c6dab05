# Copyright 2026 BrainX Ecosystem Limited. All Rights Reserved.
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
# ==============================================================================

import random

import pytest

from pcgrand._uint128 import (
    MASK64,
    MASK128,
    add_128,
    is_limb,
    join_128,
    mult_64_full,
    mult_128,
    rotr_64,
    shl1_or1_128,
    split_128,
)

EDGE_128 = [0, 1, MASK64, MASK64 + 1, MASK128, MASK128 - 1, 1 << 127, (1 << 64) | 1]


def _random_128(n, seed=0):
    rnd = random.Random(seed)
    return [rnd.getrandbits(128) for _ in range(n)] + EDGE_128


class TestSplitJoin:
    def test_split_known(self):
        assert split_128(0x0123456789ABCDEF_FEDCBA9876543210) == (0x0123456789ABCDEF, 0xFEDCBA9876543210)

    def test_join_inverts_split(self):
        for v in _random_128(50):
            assert join_128(split_128(v)) == v

    def test_split_reduces_mod_2_128(self):
        assert split_128(1 << 128) == (0, 0)


class TestIsLimb:
    @pytest.mark.parametrize('value', [0, 1, MASK64])
    def test_accepts(self, value):
        assert is_limb(value)

    @pytest.mark.parametrize('value', [-1, MASK64 + 1, 1.0, True, '1', None])
    def test_rejects(self, value):
        assert not is_limb(value)


class TestAdd128:
    def test_matches_native(self):
        values = _random_128(40)
        for a in values:
            for b in values[:10]:
                assert join_128(add_128(split_128(a), split_128(b))) == (a + b) & MASK128

    def test_carry_into_high(self):
        assert add_128((0, MASK64), (0, 1)) == (1, 0)

    def test_wraps(self):
        assert add_128((MASK64, MASK64), (0, 1)) == (0, 0)


class TestMult64Full:
    def test_matches_native(self):
        rnd = random.Random(1)
        values = [rnd.getrandbits(64) for _ in range(200)] + [0, 1, MASK64, 1 << 63, 0xFFFFFFFF]
        for x in values:
            y = rnd.getrandbits(64)
            assert join_128(mult_64_full(x, y)) == x * y

    def test_max_operands(self):
        assert join_128(mult_64_full(MASK64, MASK64)) == MASK64 * MASK64

    def test_middle_column_carry(self):
        # both cross products near 2^64 so their sum wraps
        x = 0xFFFFFFFF_FFFFFFF0
        y = 0xFFFFFFFE_FFFFFFFF
        assert join_128(mult_64_full(x, y)) == x * y


class TestMult128:
    def test_matches_native(self):
        values = _random_128(40, seed=2)
        for a in values:
            for b in values[:10]:
                assert join_128(mult_128(split_128(a), split_128(b))) == (a * b) & MASK128

    def test_identity(self):
        for a in _random_128(10, seed=3):
            assert join_128(mult_128(split_128(a), (0, 1))) == a


class TestShl1Or1:
    def test_matches_native(self):
        for a in _random_128(50, seed=4):
            assert join_128(shl1_or1_128(split_128(a))) == ((a << 1) | 1) & MASK128

    def test_low_bit_carries(self):
        assert shl1_or1_128((0, 1 << 63)) == (1, 1)

    def test_result_is_odd(self):
        assert shl1_or1_128((0, 0))[1] & 1 == 1


class TestRotr64:
    def test_zero_rotation(self):
        assert rotr_64(0x8000000000000001, 0) == 0x8000000000000001

    def test_rotate_by_one(self):
        assert rotr_64(1, 1) == 1 << 63

    def test_matches_definition(self):
        rnd = random.Random(5)
        for rot in range(64):
            v = rnd.getrandbits(64)
            expected = ((v >> rot) | (v << (64 - rot))) & MASK64
            assert rotr_64(v, rot) == expected

    def test_full_cycle_restores(self):
        v = 0x0123456789ABCDEF
        out = v
        for _ in range(64):
            out = rotr_64(out, 1)
        assert out == v
