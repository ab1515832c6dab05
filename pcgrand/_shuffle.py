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

from collections.abc import Sequence
from typing import List, Tuple, Union

import numpy as np

from ._pcg64 import PCG64State
from ._sampler import random_interval

__all__ = [
    'shuffle',
    'permutation',
]


def _fisher_yates(items: List, s: PCG64State) -> PCG64State:
    """Shuffle ``items`` in place, descending, swapping only when ``i != j``."""
    for i in range(len(items) - 1, 0, -1):
        j, s = random_interval(s, i)
        if i != j:
            items[i], items[j] = items[j], items[i]
    return s


def shuffle(seq: Union[Sequence, np.ndarray], s: PCG64State) -> Tuple[Union[Sequence, np.ndarray], PCG64State]:
    """Return a randomly permuted copy of ``seq`` and the advanced state.

    Produces the same order as ``numpy.random.Generator.shuffle`` for the
    same generator state, and consumes exactly the same draws: one
    :func:`random_interval` call per position from ``n - 1`` down to ``1``.

    Parameters
    ----------
    seq : sequence or numpy.ndarray
        Items to permute. Arrays are permuted along their first axis. The
        input is never modified.
    s : PCG64State
        Generator state.

    Returns
    -------
    shuffled : list, tuple or numpy.ndarray
        Same type as ``seq`` for lists, tuples and arrays; a list for any
        other sequence.
    state : PCG64State
        The advanced state. Inputs of length 0 or 1 return ``s`` unchanged.

    Raises
    ------
    TypeError
        If ``seq`` is not a sequence or is a 0-d array.

    Examples
    --------
    .. code-block:: python

        >>> import pcgrand
        >>> order, state = pcgrand.shuffle(list(range(10)), pcgrand.seed(42))
        >>> sorted(order) == list(range(10))
        True
    """
    if isinstance(seq, np.ndarray):
        if seq.ndim == 0:
            raise TypeError('cannot shuffle a 0-d array')
        index = list(range(seq.shape[0]))
        s = _fisher_yates(index, s)
        return seq[np.asarray(index, dtype=np.intp)], s

    if not isinstance(seq, Sequence):
        raise TypeError(f'shuffle expects a sequence or numpy.ndarray, got {type(seq).__name__}')

    items = list(seq)
    s = _fisher_yates(items, s)
    if isinstance(seq, tuple):
        return tuple(items), s
    return items, s


def permutation(x: Union[int, Sequence, np.ndarray], s: PCG64State) -> Tuple[np.ndarray, PCG64State]:
    """Randomly permute ``arange(x)`` or a copy of an array-like ``x``.

    Matches ``numpy.random.Generator.permutation``.

    Parameters
    ----------
    x : int or array_like
        If an integer, permute ``numpy.arange(x)``; otherwise permute a copy
        of ``numpy.asarray(x)`` along its first axis.
    s : PCG64State

    Returns
    -------
    permuted : numpy.ndarray
    state : PCG64State

    Raises
    ------
    ValueError
        If ``x`` is a negative integer.
    """
    if isinstance(x, (int, np.integer)) and not isinstance(x, bool):
        if x < 0:
            raise ValueError(f'permutation length must be non-negative, got {x}')
        arr = np.arange(int(x), dtype=np.int64)
    else:
        arr = np.asarray(x)
    return shuffle(arr, s)
