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
PCG64 engine matching ``numpy.random.PCG64`` bit for bit.

PCG64 is a 128-bit linear congruential generator with an odd 128-bit
increment and the XSL-RR output permutation: the two 64-bit halves of the
new state are XORed together and rotated right by the top six state bits.

The generator is a value. :class:`PCG64State` is an immutable named tuple
and every function takes one state and returns a new one, so a state can be
replayed, shared between threads, or discarded at any point::

    state = seed(42)
    a, state = next64(state)
    b, state = next32(state)
"""

from typing import Any, Dict, NamedTuple, Tuple, Union

import numpy as np

from ._error import StateDeserializationError
from ._seed_sequence import SeedSequence, generate_pcg64_state
from ._uint128 import (
    MASK32,
    MASK128,
    Limbs,
    add_128,
    is_limb,
    join_128,
    mult_128,
    rotr_64,
    shl1_or1_128,
    split_128,
)
from .config import resolve_default_seed

__all__ = [
    'MULTIPLIER',
    'PCG64State',
    'seed',
    'seed_from_raw',
    'seed_from_sequence',
    'initialize_raw',
    'next64',
    'next32',
    'advance',
    'jumped',
    'to_state_dict',
    'from_state_dict',
    'as_state',
]

# PCG_DEFAULT_MULTIPLIER_128
MULTIPLIER = 0x2360ED051FC65DA44385DF649FCCF645
_MULTIPLIER_LIMBS = split_128(MULTIPLIER)

# (sqrt(5) - 1) / 2 * 2^128, the stride used by ``PCG64.jumped``
_JUMP_STRIDE = 0x9E3779B97F4A7C15F39CC0605CEDC835

_BIT_GENERATOR_NAME = 'PCG64'


class PCG64State(NamedTuple):
    """Immutable PCG64 generator state.

    Parameters
    ----------
    state_high, state_low : int
        The 128-bit LCG state as two unsigned 64-bit limbs.
    inc_high, inc_low : int
        The 128-bit increment as two unsigned 64-bit limbs. ``inc_low`` is
        always odd.
    has_uint32 : bool, optional
        Whether :attr:`uinteger` holds an unconsumed 32-bit output.
    uinteger : int, optional
        The buffered upper half of the last 64-bit output. Consuming the
        half only clears :attr:`has_uint32` and leaves the value in place,
        as NumPy's ``bit_generator.state`` does.

    See Also
    --------
    seed : Build a state from an integer seed.
    to_state_dict : Export a state in NumPy's ``bit_generator.state`` layout.

    Notes
    -----
    Build states through :func:`seed`, :func:`seed_from_raw`,
    :func:`initialize_raw` or :func:`from_state_dict`; those entry points
    validate the limbs and guarantee an odd increment. The transition
    functions only ever replace ``state_*`` and the buffer fields.
    """
    state_high: int
    state_low: int
    inc_high: int
    inc_low: int
    has_uint32: bool = False
    uinteger: int = 0

    @property
    def state(self) -> int:
        """The 128-bit LCG state as a single integer."""
        return join_128((self.state_high, self.state_low))

    @property
    def inc(self) -> int:
        """The 128-bit increment as a single integer."""
        return join_128((self.inc_high, self.inc_low))


# ──────────────────────────────────────────────────────────────────────
#  Core transition
# ──────────────────────────────────────────────────────────────────────

def _step(s: PCG64State) -> PCG64State:
    """``state = state * MULTIPLIER + inc (mod 2^128)``; buffer fields untouched."""
    high, low = add_128(
        mult_128((s.state_high, s.state_low), _MULTIPLIER_LIMBS),
        (s.inc_high, s.inc_low),
    )
    return s._replace(state_high=high, state_low=low)


def _output(s: PCG64State) -> int:
    """XSL-RR: fold the halves together, rotate by the top six bits."""
    return rotr_64(s.state_high ^ s.state_low, s.state_high >> 58)


def next64(s: PCG64State) -> Tuple[int, PCG64State]:
    """Draw one unsigned 64-bit word.

    Always steps the LCG once and discards any buffered 32-bit half by
    clearing :attr:`PCG64State.has_uint32`.

    Returns
    -------
    value : int
        Output in ``[0, 2**64)``.
    state : PCG64State
        The advanced state.
    """
    s = _step(s)
    return _output(s), s._replace(has_uint32=False)


def next32(s: PCG64State) -> Tuple[int, PCG64State]:
    """Draw one unsigned 32-bit word.

    A 64-bit output is consumed in two halves: the first call steps the LCG,
    returns the low 32 bits and buffers the high 32 bits; the second call
    returns the buffered half without stepping.

    Returns
    -------
    value : int
        Output in ``[0, 2**32)``.
    state : PCG64State
        The advanced state.
    """
    if s.has_uint32:
        return s.uinteger, s._replace(has_uint32=False)
    s = _step(s)
    out = _output(s)
    return out & MASK32, s._replace(has_uint32=True, uinteger=out >> 32)


# ──────────────────────────────────────────────────────────────────────
#  Construction
# ──────────────────────────────────────────────────────────────────────

def _check_limb(name: str, value) -> int:
    if isinstance(value, np.integer):
        value = int(value)
    if not is_limb(value):
        raise StateDeserializationError(f'{name} must be an unsigned 64-bit integer, got {value!r}')
    return value


def _check_pair(name: str, pair) -> Limbs:
    if isinstance(pair, np.ndarray):
        pair = pair.tolist()
    if not isinstance(pair, (tuple, list)) or len(pair) != 2:
        raise StateDeserializationError(f'{name} must be a (high, low) pair of 64-bit limbs, got {pair!r}')
    return _check_limb(f'{name}[0]', pair[0]), _check_limb(f'{name}[1]', pair[1])


def _construct(init_state: Limbs, init_seq: Limbs) -> PCG64State:
    # pcg_setseq_128_srandom_r: the two steps around the addition are part of
    # the reference seeding and shift every subsequent output.
    inc_high, inc_low = shl1_or1_128(init_seq)
    s = PCG64State(0, 0, inc_high, inc_low)
    s = _step(s)
    high, low = add_128((s.state_high, s.state_low), init_state)
    s = s._replace(state_high=high, state_low=low)
    return _step(s)


def seed(seed_value: int) -> PCG64State:
    """Create a state the way ``numpy.random.PCG64(seed_value)`` does.

    Parameters
    ----------
    seed_value : int
        Non-negative seed of any magnitude.

    Returns
    -------
    PCG64State

    Raises
    ------
    InvalidSeedError
        If ``seed_value`` is negative.
    TypeError
        If ``seed_value`` is not an integer.

    Examples
    --------
    .. code-block:: python

        >>> import pcgrand
        >>> state = pcgrand.seed(42)
        >>> value, state = pcgrand.next32(state)
    """
    state_high, state_low, inc_high, inc_low = generate_pcg64_state(seed_value)
    return _construct((state_high, state_low), (inc_high, inc_low))


def seed_from_sequence(seed_sequence: SeedSequence) -> PCG64State:
    """Create a state from a :class:`SeedSequence`, spawned children included."""
    w = [int(v) for v in seed_sequence.generate_state(4, np.uint64)]
    return _construct((w[0], w[1]), (w[2], w[3]))


def seed_from_raw(state_high: int, state_low: int, inc_high: int, inc_low: int) -> PCG64State:
    """Run the seeding sequence on explicit initial-state and sequence limbs.

    This is the entry point for reproducing externally known reference
    snapshots: the four limbs are exactly what the seed expander would
    produce, before the increment is made odd and the warm-up steps run.

    Raises
    ------
    StateDeserializationError
        If any limb is not an integer in ``[0, 2**64)``.
    """
    init_state = (_check_limb('state_high', state_high), _check_limb('state_low', state_low))
    init_seq = (_check_limb('inc_high', inc_high), _check_limb('inc_low', inc_low))
    return _construct(init_state, init_seq)


def initialize_raw(state128: Limbs, seq128: Limbs) -> PCG64State:
    """Run the seeding sequence on a 128-bit initial state and sequence value.

    Parameters
    ----------
    state128, seq128 : tuple of int
        ``(high, low)`` limb pairs.

    Raises
    ------
    StateDeserializationError
        If either argument is not a pair of unsigned 64-bit integers.
    """
    return _construct(_check_pair('state128', state128), _check_pair('seq128', seq128))


# ──────────────────────────────────────────────────────────────────────
#  Jumping
# ──────────────────────────────────────────────────────────────────────

def advance(s: PCG64State, delta: int) -> PCG64State:
    """Move the state as if ``delta`` 64-bit draws had been made.

    Uses Brown's logarithmic-time LCG jump, composing the affine map
    ``x -> MULTIPLIER * x + inc`` with itself by repeated squaring on limb
    pairs. ``delta`` is taken modulo ``2**128``, so negative values step
    backwards. The 32-bit buffer is cleared, as NumPy does.

    Parameters
    ----------
    s : PCG64State
    delta : int

    Returns
    -------
    PCG64State
    """
    delta = int(delta) & MASK128
    acc_mult: Limbs = (0, 1)
    acc_plus: Limbs = (0, 0)
    cur_mult: Limbs = _MULTIPLIER_LIMBS
    cur_plus: Limbs = (s.inc_high, s.inc_low)
    while delta > 0:
        if delta & 1:
            acc_mult = mult_128(acc_mult, cur_mult)
            acc_plus = add_128(mult_128(acc_plus, cur_mult), cur_plus)
        cur_plus = mult_128(add_128(cur_mult, (0, 1)), cur_plus)
        cur_mult = mult_128(cur_mult, cur_mult)
        delta >>= 1
    high, low = add_128(mult_128(acc_mult, (s.state_high, s.state_low)), acc_plus)
    return s._replace(state_high=high, state_low=low, has_uint32=False, uinteger=0)


def jumped(s: PCG64State, jumps: int = 1) -> PCG64State:
    """Return a state ``jumps * ~0.618 * 2**128`` draws ahead.

    Equivalent to ``numpy.random.PCG64.jumped``. Jumped states are the
    recommended way to hand non-overlapping streams to parallel workers
    that share one seed.
    """
    return advance(s, _JUMP_STRIDE * int(jumps))


# ──────────────────────────────────────────────────────────────────────
#  Persistence
# ──────────────────────────────────────────────────────────────────────

def to_state_dict(s: PCG64State) -> Dict[str, Any]:
    """Export a state in ``numpy.random.PCG64().state`` layout.

    The returned dictionary can be assigned to ``bit_generator.state`` of a
    NumPy ``PCG64`` to continue the same stream there.
    """
    return {
        'bit_generator': _BIT_GENERATOR_NAME,
        'state': {'state': s.state, 'inc': s.inc},
        'has_uint32': int(s.has_uint32),
        'uinteger': s.uinteger,
    }


def _check_uint(name: str, value, bits: int) -> int:
    if isinstance(value, np.integer):
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < (1 << bits):
        raise StateDeserializationError(f'{name} must be an unsigned {bits}-bit integer, got {value!r}')
    return value


def from_state_dict(d: Dict[str, Any]) -> PCG64State:
    """Restore a state exported by :func:`to_state_dict` or by NumPy.

    Raises
    ------
    StateDeserializationError
        If the dictionary is not a PCG64 state, a field is missing, a value
        does not fit its width, or the increment is even.
    """
    if not isinstance(d, dict):
        raise StateDeserializationError(f'state must be a dict, got {type(d).__name__}')
    if d.get('bit_generator') != _BIT_GENERATOR_NAME:
        raise StateDeserializationError(
            f'state must be for a {_BIT_GENERATOR_NAME} PRNG, got {d.get("bit_generator")!r}'
        )
    try:
        inner = d['state']
        raw_state = inner['state']
        raw_inc = inner['inc']
        raw_has = d['has_uint32']
        raw_uinteger = d['uinteger']
    except (KeyError, TypeError) as e:
        raise StateDeserializationError(f'state dict is missing field {e}') from None

    state = _check_uint('state', raw_state, 128)
    inc = _check_uint('inc', raw_inc, 128)
    if not inc & 1:
        raise StateDeserializationError(f'inc must be odd, got {inc:#x}')
    if isinstance(raw_has, bool):
        raw_has = int(raw_has)
    has_uint32 = _check_uint('has_uint32', raw_has, 1)
    uinteger = _check_uint('uinteger', raw_uinteger, 32)

    state_high, state_low = split_128(state)
    inc_high, inc_low = split_128(inc)
    return PCG64State(state_high, state_low, inc_high, inc_low, bool(has_uint32), uinteger)


# ──────────────────────────────────────────────────────────────────────
#  Argument normalization
# ──────────────────────────────────────────────────────────────────────

RNGLike = Union[None, int, np.integer, SeedSequence, PCG64State]


def as_state(rng: RNGLike = None) -> PCG64State:
    """Normalize a seed-like argument into a :class:`PCG64State`.

    Parameters
    ----------
    rng : None, int, SeedSequence or PCG64State
        ``PCG64State`` is returned unchanged, integers go through
        :func:`seed`, sequences through :func:`seed_from_sequence`.
        ``None`` uses the configured default seed (see
        :func:`pcgrand.config.resolve_default_seed`) and falls back to fresh
        operating-system entropy when none is configured.

    Notes
    -----
    Only the ``None`` path leaves the process: it may read the persisted
    user defaults file once (the result is cached) and may draw OS entropy.
    Every other argument is resolved purely in memory.

    Raises
    ------
    TypeError
        If ``rng`` is of any other type.
    """
    if isinstance(rng, PCG64State):
        return rng
    if isinstance(rng, SeedSequence):
        return seed_from_sequence(rng)
    if rng is None:
        default = resolve_default_seed()
        if default is None:
            return seed_from_sequence(SeedSequence())
        return seed(default)
    if isinstance(rng, (int, np.integer)):
        return seed(int(rng))
    raise TypeError(f'rng must be None, an int, a SeedSequence or a PCG64State, got {type(rng).__name__}')
