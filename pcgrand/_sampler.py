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
Bounded integers by masked rejection, as in NumPy's ``random_interval``.
"""

from typing import Tuple

import numpy as np

from ._pcg64 import PCG64State, next32, next64
from ._uint128 import MASK32, MASK64

__all__ = [
    'interval_mask',
    'random_interval',
]


def interval_mask(max_value: int) -> int:
    """Smallest ``2**k - 1`` that is ``>= max_value`` (for 64-bit inputs)."""
    mask = max_value
    mask |= mask >> 1
    mask |= mask >> 2
    mask |= mask >> 4
    mask |= mask >> 8
    mask |= mask >> 16
    mask |= mask >> 32
    return mask


def random_interval(s: PCG64State, max_value: int) -> Tuple[int, PCG64State]:
    """Draw an integer uniformly from the closed interval ``[0, max_value]``.

    Candidates are masked down to the smallest covering power of two and
    rejected until one lands in range, so fewer than two draws are needed on
    average. The word size is chosen by ``max_value`` alone: 32-bit draws
    (buffered through :func:`next32`) when it fits in 32 bits, 64-bit draws
    otherwise. That choice fixes how much of the stream each call consumes,
    and therefore every later value.

    Parameters
    ----------
    s : PCG64State
        Generator state.
    max_value : int
        Inclusive upper bound in ``[0, 2**64)``. ``0`` returns ``0`` and
        consumes nothing.

    Returns
    -------
    value : int
    state : PCG64State

    Raises
    ------
    ValueError
        If ``max_value`` is negative or does not fit in 64 bits.
    TypeError
        If ``max_value`` is not an integer.

    Examples
    --------
    .. code-block:: python

        >>> import pcgrand
        >>> state = pcgrand.seed(42)
        >>> die, state = pcgrand.random_interval(state, 5)
        >>> 0 <= die <= 5
        True
    """
    if isinstance(max_value, np.integer):
        max_value = int(max_value)
    if isinstance(max_value, bool) or not isinstance(max_value, int):
        raise TypeError(f'max_value must be an integer, got {type(max_value).__name__}')
    if not 0 <= max_value <= MASK64:
        raise ValueError(f'max_value must be in [0, 2**64), got {max_value}')

    if max_value == 0:
        return 0, s

    mask = interval_mask(max_value)
    draw = next32 if max_value <= MASK32 else next64
    while True:
        value, s = draw(s)
        value &= mask
        if value <= max_value:
            return value, s
