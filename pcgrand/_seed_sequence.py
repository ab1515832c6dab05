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

"""
Entropy-pool seed expansion compatible with ``numpy.random.SeedSequence``.

An arbitrary-precision seed is cut into little-endian 32-bit words, hashed
into a fixed-size pool, cross-mixed so that every word influences every
other, and finally drawn out through a second hash to produce as many
32-bit (or 64-bit) state words as a bit generator needs.

The constants below are the ones published with NumPy's implementation
(derived from Melissa O'Neill's ``seed_seq_fe``). They are literals required
for bit compatibility: changing any of them silently yields a different,
equally plausible-looking stream.
"""

import secrets
from itertools import cycle
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from ._error import InvalidSeedError
from ._uint128 import MASK32

__all__ = [
    'DEFAULT_POOL_SIZE',
    'SeedSequence',
    'generate_pcg64_state',
]

DEFAULT_POOL_SIZE = 4

INIT_A = 0x43B0D7E5
MULT_A = 0x931E8875
INIT_B = 0x8B51F9DD
MULT_B = 0x58F38DED
MIX_MULT_L = 0xCA01F9DD
MIX_MULT_R = 0x4973F715
XSHIFT = 16

Entropy = Union[int, np.integer, Sequence[int], np.ndarray]


# ──────────────────────────────────────────────────────────────────────
#  Entropy coercion
# ──────────────────────────────────────────────────────────────────────

def _int_to_uint32_words(n: int) -> List[int]:
    if n < 0:
        raise InvalidSeedError(f'seed must be a non-negative integer, got {n}')
    if n == 0:
        return [0]
    words = []
    while n > 0:
        words.append(n & MASK32)
        n >>= 32
    return words


def _coerce_to_uint32_words(x) -> List[int]:
    """Flatten an int, a nested sequence of ints, or an integer array into words."""
    if isinstance(x, (int, np.integer)):
        return _int_to_uint32_words(int(x))
    if isinstance(x, (float, np.inexact)):
        raise TypeError(f'seed must be an integer, got {type(x).__name__}')
    if isinstance(x, np.ndarray) and x.dtype == np.uint32:
        return [int(v) for v in x.ravel()]
    if isinstance(x, (str, bytes)):
        raise TypeError(f'seed must be an integer or a sequence of integers, got {type(x).__name__}')
    try:
        items = list(x)
    except TypeError:
        raise TypeError(
            f'seed must be an integer or a sequence of integers, got {type(x).__name__}'
        ) from None
    words = []
    for item in items:
        words.extend(_coerce_to_uint32_words(item))
    return words


# ──────────────────────────────────────────────────────────────────────
#  Hashing
# ──────────────────────────────────────────────────────────────────────

def _hashmix(value: int, hash_const: int) -> Tuple[int, int]:
    """Hash one 32-bit word, returning ``(hashed, next_hash_const)``."""
    value = (value ^ hash_const) & MASK32
    hash_const = (hash_const * MULT_A) & MASK32
    value = (value * hash_const) & MASK32
    value ^= value >> XSHIFT
    return value, hash_const


def _mix(x: int, y: int) -> int:
    result = (MIX_MULT_L * x - MIX_MULT_R * y) & MASK32
    result ^= result >> XSHIFT
    return result


def _mix_entropy(entropy: Sequence[int], pool_size: int) -> List[int]:
    hash_const = INIT_A
    pool = [0] * pool_size

    # Seed the pool; missing entropy words hash as zero.
    for i in range(pool_size):
        value = entropy[i] if i < len(entropy) else 0
        pool[i], hash_const = _hashmix(value, hash_const)

    # Cross-mix so late pool words also influence early ones.
    for i_src in range(pool_size):
        for i_dst in range(pool_size):
            if i_src != i_dst:
                hashed, hash_const = _hashmix(pool[i_src], hash_const)
                pool[i_dst] = _mix(pool[i_dst], hashed)

    # Fold in any entropy that did not fit in the pool.
    for i_src in range(pool_size, len(entropy)):
        for i_dst in range(pool_size):
            hashed, hash_const = _hashmix(entropy[i_src], hash_const)
            pool[i_dst] = _mix(pool[i_dst], hashed)

    return pool


def _draw_words(pool: Sequence[int], n_words: int) -> List[int]:
    hash_const = INIT_B
    words = []
    src = cycle(pool)
    for _ in range(n_words):
        value = (next(src) ^ hash_const) & MASK32
        hash_const = (hash_const * MULT_B) & MASK32
        value = (value * hash_const) & MASK32
        value ^= value >> XSHIFT
        words.append(value)
    return words


# ──────────────────────────────────────────────────────────────────────
#  SeedSequence
# ──────────────────────────────────────────────────────────────────────

class SeedSequence:
    """Immutable, NumPy-compatible seed sequence.

    Mixes user-supplied entropy (and an optional spawn key) into a pool of
    32-bit words from which bit-generator state is drawn. Two sequences built
    from the same ``entropy``, ``spawn_key`` and ``pool_size`` produce the
    same words as ``numpy.random.SeedSequence`` does.

    Parameters
    ----------
    entropy : int, sequence of int, numpy.ndarray or None, optional
        Non-negative seed material. Large integers are split into
        little-endian 32-bit words; sequences are flattened and concatenated.
        ``None`` draws ``32 * pool_size`` fresh bits from the operating
        system, which is recorded in :attr:`entropy` so the sequence can be
        reproduced later.
    spawn_key : tuple of int, optional
        Path of child indices identifying a spawned sequence.
    pool_size : int, optional
        Number of 32-bit words in the pool. At least ``4``.
    n_children_spawned : int, optional
        Number of children already spawned from this sequence.

    Raises
    ------
    InvalidSeedError
        If ``entropy`` or ``spawn_key`` contains a negative integer.
    TypeError
        If ``entropy`` contains a non-integer.
    ValueError
        If ``pool_size`` is smaller than :data:`DEFAULT_POOL_SIZE`.

    See Also
    --------
    generate_pcg64_state : Shortcut used by :func:`pcgrand.seed`.

    Notes
    -----
    Unlike NumPy's class, :meth:`spawn` does not mutate the receiver. It
    returns the children together with a new parent whose
    :attr:`n_children_spawned` has been advanced.

    Examples
    --------
    .. code-block:: python

        >>> from pcgrand import SeedSequence
        >>> ss = SeedSequence(42)
        >>> ss.generate_state(4, 'uint64').shape
        (4,)
        >>> children, ss = ss.spawn(2)
        >>> children[1].spawn_key
        (1,)
    """
    __module__ = 'pcgrand'
    __slots__ = ('entropy', 'spawn_key', 'pool_size', 'n_children_spawned', '_pool')

    def __init__(
        self,
        entropy: Optional[Entropy] = None,
        *,
        spawn_key: Sequence[int] = (),
        pool_size: int = DEFAULT_POOL_SIZE,
        n_children_spawned: int = 0,
    ):
        if pool_size < DEFAULT_POOL_SIZE:
            raise ValueError(
                f'The size of the entropy pool should be at least {DEFAULT_POOL_SIZE}, got {pool_size}.'
            )
        if entropy is None:
            entropy = secrets.randbits(pool_size * 32)
        self.entropy = entropy
        self.spawn_key = tuple(int(k) for k in spawn_key)
        self.pool_size = pool_size
        self.n_children_spawned = n_children_spawned
        self._pool = _mix_entropy(self._assembled_entropy(), pool_size)

    def _assembled_entropy(self) -> List[int]:
        run_entropy = _coerce_to_uint32_words(self.entropy)
        spawn_entropy = _coerce_to_uint32_words(self.spawn_key)
        if spawn_entropy and len(run_entropy) < self.pool_size:
            # Pad so the spawn key can never collide with plain entropy words.
            run_entropy = run_entropy + [0] * (self.pool_size - len(run_entropy))
        return run_entropy + spawn_entropy

    @property
    def pool(self) -> np.ndarray:
        """The mixed entropy pool as a ``uint32`` array."""
        return np.array(self._pool, dtype=np.uint32)

    def generate_state(self, n_words: int, dtype=np.uint32) -> np.ndarray:
        """Draw ``n_words`` state words from the pool.

        Parameters
        ----------
        n_words : int
            Number of words to return.
        dtype : {numpy.uint32, numpy.uint64}, optional
            Word size. ``uint64`` words pair consecutive ``uint32`` draws,
            low word first.

        Returns
        -------
        numpy.ndarray
            Array of shape ``(n_words,)``.

        Raises
        ------
        ValueError
            If ``dtype`` is neither ``uint32`` nor ``uint64``.
        """
        out_dtype = np.dtype(dtype)
        if out_dtype == np.dtype(np.uint32):
            return np.array(_draw_words(self._pool, n_words), dtype=np.uint32)
        if out_dtype == np.dtype(np.uint64):
            words = _draw_words(self._pool, 2 * n_words)
            pairs = [words[i] | (words[i + 1] << 32) for i in range(0, len(words), 2)]
            return np.array(pairs, dtype=np.uint64)
        raise ValueError(f'only support uint32 or uint64, got {out_dtype}')

    def spawn(self, n_children: int) -> Tuple[List['SeedSequence'], 'SeedSequence']:
        """Create ``n_children`` independent child sequences.

        Returns
        -------
        children : list of SeedSequence
            Children keyed ``spawn_key + (i,)`` for consecutive ``i`` starting
            at :attr:`n_children_spawned`.
        parent : SeedSequence
            This sequence with :attr:`n_children_spawned` advanced.
        """
        if n_children < 0:
            raise ValueError(f'n_children must be non-negative, got {n_children}')
        start = self.n_children_spawned
        children = [
            SeedSequence(self.entropy, spawn_key=self.spawn_key + (i,), pool_size=self.pool_size)
            for i in range(start, start + n_children)
        ]
        parent = SeedSequence(
            self.entropy,
            spawn_key=self.spawn_key,
            pool_size=self.pool_size,
            n_children_spawned=start + n_children,
        )
        return children, parent

    def __eq__(self, other):
        if not isinstance(other, SeedSequence):
            return NotImplemented
        return (
            self._pool == other._pool
            and self.spawn_key == other.spawn_key
            and self.pool_size == other.pool_size
            and self.n_children_spawned == other.n_children_spawned
        )

    def __hash__(self):
        return hash((tuple(self._pool), self.spawn_key, self.pool_size, self.n_children_spawned))

    def __repr__(self):
        parts = [f'entropy={self.entropy!r}']
        if self.spawn_key:
            parts.append(f'spawn_key={self.spawn_key!r}')
        if self.pool_size != DEFAULT_POOL_SIZE:
            parts.append(f'pool_size={self.pool_size}')
        if self.n_children_spawned:
            parts.append(f'n_children_spawned={self.n_children_spawned}')
        return f'SeedSequence({", ".join(parts)})'


def generate_pcg64_state(seed: int) -> Tuple[int, int, int, int]:
    """Expand an integer seed into PCG64 initial state and increment limbs.

    Parameters
    ----------
    seed : int
        Non-negative seed of any magnitude.

    Returns
    -------
    tuple of int
        ``(state_high, state_low, inc_high, inc_low)``, each an unsigned
        64-bit value. NumPy hands the four ``uint64`` words to
        ``pcg64_set_seed`` as ``state = (w[0] << 64) | w[1]`` and
        ``inc = (w[2] << 64) | w[3]``.

    Raises
    ------
    InvalidSeedError
        If ``seed`` is negative.
    TypeError
        If ``seed`` is not an integer.
    """
    if not isinstance(seed, (int, np.integer)):
        raise TypeError(f'seed must be an integer, got {type(seed).__name__}')
    words = SeedSequence(int(seed)).generate_state(4, np.uint64)
    state_high, state_low, inc_high, inc_low = (int(w) for w in words)
    return state_high, state_low, inc_high, inc_low
