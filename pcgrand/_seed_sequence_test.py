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

import numpy as np
import pytest

from pcgrand import InvalidSeedError, SeedSequence, generate_pcg64_state

ENTROPIES = [
    0,
    1,
    42,
    2 ** 32,
    2 ** 64 - 1,
    2 ** 128 + 12345,
    # wider than the pool, exercising the fold-in phase
    2 ** 200 - 7,
    [1, 2, 3],
    [2 ** 40, 5],
    np.array([7, 8, 9, 10, 11], dtype=np.uint32),
]


class TestAgainstNumpy:
    @pytest.mark.parametrize('entropy', ENTROPIES)
    def test_pool(self, entropy):
        expected = np.random.SeedSequence(entropy).pool
        np.testing.assert_array_equal(SeedSequence(entropy).pool, expected)

    @pytest.mark.parametrize('entropy', ENTROPIES)
    def test_generate_state_uint32(self, entropy):
        expected = np.random.SeedSequence(entropy).generate_state(10)
        np.testing.assert_array_equal(SeedSequence(entropy).generate_state(10), expected)

    @pytest.mark.parametrize('entropy', ENTROPIES)
    def test_generate_state_uint64(self, entropy):
        expected = np.random.SeedSequence(entropy).generate_state(4, np.uint64)
        got = SeedSequence(entropy).generate_state(4, np.uint64)
        assert got.dtype == np.uint64
        np.testing.assert_array_equal(got, expected)

    def test_larger_pool(self):
        expected = np.random.SeedSequence(42, pool_size=8)
        got = SeedSequence(42, pool_size=8)
        np.testing.assert_array_equal(got.pool, expected.pool)
        np.testing.assert_array_equal(got.generate_state(6), expected.generate_state(6))

    def test_spawn_key(self):
        expected = np.random.SeedSequence(42, spawn_key=(3, 1))
        got = SeedSequence(42, spawn_key=(3, 1))
        np.testing.assert_array_equal(got.generate_state(4, np.uint64), expected.generate_state(4, np.uint64))

    def test_spawned_children(self):
        expected = np.random.SeedSequence(12345).spawn(3)
        children, _ = SeedSequence(12345).spawn(3)
        assert len(children) == 3
        for child, ref in zip(children, expected):
            assert child.spawn_key == tuple(ref.spawn_key)
            np.testing.assert_array_equal(child.generate_state(4, np.uint64), ref.generate_state(4, np.uint64))

    def test_generate_pcg64_state(self):
        words = np.random.SeedSequence(42).generate_state(4, np.uint64)
        assert generate_pcg64_state(42) == tuple(int(w) for w in words)


class TestSeedSequence:
    def test_deterministic(self):
        a = SeedSequence(99).generate_state(8)
        b = SeedSequence(99).generate_state(8)
        np.testing.assert_array_equal(a, b)

    def test_generate_state_is_repeatable(self):
        ss = SeedSequence(99)
        np.testing.assert_array_equal(ss.generate_state(4), ss.generate_state(4))

    def test_prefix_property(self):
        ss = SeedSequence(5)
        np.testing.assert_array_equal(ss.generate_state(8)[:3], ss.generate_state(3))

    def test_uint64_pairs_low_word_first(self):
        ss = SeedSequence(5)
        w32 = [int(v) for v in ss.generate_state(4)]
        w64 = [int(v) for v in ss.generate_state(2, np.uint64)]
        assert w64 == [w32[0] | (w32[1] << 32), w32[2] | (w32[3] << 32)]

    def test_zero_words(self):
        assert SeedSequence(5).generate_state(0).shape == (0,)

    def test_different_seeds_differ(self):
        assert not np.array_equal(SeedSequence(1).pool, SeedSequence(2).pool)

    def test_none_draws_fresh_entropy(self):
        a = SeedSequence()
        b = SeedSequence()
        assert isinstance(a.entropy, int)
        assert 0 <= a.entropy < 2 ** 128
        assert a.entropy != b.entropy

    def test_none_entropy_is_reproducible(self):
        a = SeedSequence()
        np.testing.assert_array_equal(SeedSequence(a.entropy).pool, a.pool)

    def test_spawn_does_not_mutate(self):
        parent = SeedSequence(7)
        children, new_parent = parent.spawn(2)
        assert parent.n_children_spawned == 0
        assert new_parent.n_children_spawned == 2
        more, _ = new_parent.spawn(1)
        assert [c.spawn_key for c in children + more] == [(0,), (1,), (2,)]

    def test_spawn_grandchildren(self):
        (child,), _ = SeedSequence(7).spawn(1)
        (grandchild,), _ = child.spawn(1)
        assert grandchild.spawn_key == (0, 0)

    def test_spawn_zero(self):
        children, parent = SeedSequence(7).spawn(0)
        assert children == []
        assert parent.n_children_spawned == 0

    def test_spawn_negative_raises(self):
        with pytest.raises(ValueError):
            SeedSequence(7).spawn(-1)

    def test_children_differ_from_parent(self):
        parent = SeedSequence(7)
        children, _ = parent.spawn(2)
        assert not np.array_equal(children[0].pool, parent.pool)
        assert not np.array_equal(children[0].pool, children[1].pool)

    def test_equality_and_hash(self):
        assert SeedSequence(3) == SeedSequence(3)
        assert hash(SeedSequence(3)) == hash(SeedSequence(3))
        assert SeedSequence(3) != SeedSequence(4)
        assert SeedSequence(3) != SeedSequence(3, spawn_key=(0,))

    def test_repr(self):
        assert repr(SeedSequence(42)) == 'SeedSequence(entropy=42)'
        assert repr(SeedSequence(42, spawn_key=(1,))) == 'SeedSequence(entropy=42, spawn_key=(1,))'


class TestErrors:
    def test_negative_entropy(self):
        with pytest.raises(InvalidSeedError):
            SeedSequence(-1)

    def test_negative_in_sequence(self):
        with pytest.raises(InvalidSeedError):
            SeedSequence([1, -2])

    def test_invalid_seed_is_value_error(self):
        with pytest.raises(ValueError):
            SeedSequence(-5)

    @pytest.mark.parametrize('entropy', [1.5, 'abc', b'abc', [1, 2.0], object()])
    def test_non_integer(self, entropy):
        with pytest.raises(TypeError):
            SeedSequence(entropy)

    def test_small_pool(self):
        with pytest.raises(ValueError):
            SeedSequence(1, pool_size=3)

    def test_bad_dtype(self):
        with pytest.raises(ValueError):
            SeedSequence(1).generate_state(2, np.float64)

    def test_generate_pcg64_state_rejects_float(self):
        with pytest.raises(TypeError):
            generate_pcg64_state(1.0)

    def test_generate_pcg64_state_rejects_negative(self):
        with pytest.raises(InvalidSeedError):
            generate_pcg64_state(-3)
