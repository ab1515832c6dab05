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
Unsigned 128-bit arithmetic on ``(high, low)`` pairs of 64-bit limbs.

Every helper here mirrors what a C implementation without a native
``__uint128_t`` has to do: limbs never exceed 64 bits, partial products are
built from 32-bit halves, and carries are propagated explicitly. Results are
reduced modulo 2^128 (pairs) or 2^64 (single limbs).
"""

from typing import Tuple

__all__ = [
    'MASK32',
    'MASK64',
    'MASK128',
    'Limbs',
    'split_128',
    'join_128',
    'add_128',
    'mult_64_full',
    'mult_128',
    'shl1_or1_128',
    'rotr_64',
    'is_limb',
]

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF
MASK128 = (1 << 128) - 1

Limbs = Tuple[int, int]


def split_128(value: int) -> Limbs:
    """Split a 128-bit integer into ``(high, low)`` limbs."""
    value &= MASK128
    return value >> 64, value & MASK64


def join_128(limbs: Limbs) -> int:
    """Join ``(high, low)`` limbs back into a single integer."""
    high, low = limbs
    return (high << 64) | low


def is_limb(value) -> bool:
    """Return whether ``value`` is an ``int`` that fits in 64 unsigned bits."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MASK64


def add_128(a: Limbs, b: Limbs) -> Limbs:
    """Add two limb pairs modulo 2^128.

    Parameters
    ----------
    a, b : tuple of int
        ``(high, low)`` operands.

    Returns
    -------
    tuple of int
        ``(high, low)`` of ``a + b`` truncated to 128 bits.
    """
    a_high, a_low = a
    b_high, b_low = b
    low = (a_low + b_low) & MASK64
    carry = 1 if low < a_low else 0
    high = (a_high + b_high + carry) & MASK64
    return high, low


def mult_64_full(x: int, y: int) -> Limbs:
    """Multiply two 64-bit limbs into a full 128-bit ``(high, low)`` product.

    The operands are split into 32-bit halves and the four partial products
    are recombined with explicit carries, so no intermediate value needs
    more than 64 bits plus one carry bit.
    """
    x0 = x & MASK32
    x1 = x >> 32
    y0 = y & MASK32
    y1 = y >> 32

    p00 = x0 * y0
    p01 = x0 * y1
    p10 = x1 * y0
    p11 = x1 * y1

    # middle column; a wrap here is worth 2^96 of the product, i.e. 2^32 of high
    mid = (p01 + p10) & MASK64
    mid_carry = (1 << 32) if mid < p01 else 0

    low = (p00 + ((mid << 32) & MASK64)) & MASK64
    low_carry = 1 if low < p00 else 0

    high = (p11 + (mid >> 32) + mid_carry + low_carry) & MASK64
    return high, low


def mult_128(a: Limbs, b: Limbs) -> Limbs:
    """Multiply two limb pairs modulo 2^128.

    Only ``a_low * b_low`` needs its full width; the cross products land
    entirely in the high limb and ``a_high * b_high`` overflows out of
    range.
    """
    a_high, a_low = a
    b_high, b_low = b
    prod_high, prod_low = mult_64_full(a_low, b_low)
    cross1 = (a_high * b_low) & MASK64
    cross2 = (a_low * b_high) & MASK64
    high = (prod_high + cross1 + cross2) & MASK64
    return high, prod_low


def shl1_or1_128(a: Limbs) -> Limbs:
    """Compute ``(a << 1) | 1`` modulo 2^128, carrying the low limb's top bit."""
    high, low = a
    new_low = ((low << 1) | 1) & MASK64
    new_high = ((high << 1) | (low >> 63)) & MASK64
    return new_high, new_low


def rotr_64(value: int, rot: int) -> int:
    """Rotate a 64-bit value right by ``rot`` (0-63) bits."""
    value &= MASK64
    if rot == 0:
        return value
    return ((value >> rot) | (value << (64 - rot))) & MASK64
