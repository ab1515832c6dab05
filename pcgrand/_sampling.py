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
Reproducible index selection for dataset splitting and sampling.

Every helper works on row indices rather than on data, shuffles with
:func:`pcgrand.permutation` (so the order matches NumPy's
``default_rng(seed).permutation(n)``), and returns ``(result, state)`` so
the caller can keep drawing from the same stream. The ``rng`` argument
accepts anything :func:`pcgrand.as_state` does.
"""

import math
from typing import Dict, Hashable, List, Sequence, Tuple, Union

import numpy as np

from ._pcg64 import PCG64State, RNGLike, as_state
from ._shuffle import permutation

__all__ = [
    'sample_indices',
    'train_test_split_indices',
    'k_fold_indices',
    'stratified_indices',
]


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _check_count(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f'{name} must be an integer, got {type(value).__name__}')
    value = int(value)
    if value < 0:
        raise ValueError(f'{name} must be non-negative, got {value}')
    return value


def sample_indices(n: int, k: int, rng: RNGLike = None) -> Tuple[np.ndarray, PCG64State]:
    """Choose ``k`` distinct indices from ``range(n)`` without replacement.

    The result is the first ``k`` entries of a full permutation, so sampling
    ``k`` and then ``k + 1`` items with the same seed shares a prefix.

    Raises
    ------
    ValueError
        If ``k > n`` or either count is negative.
    """
    n = _check_count('n', n)
    k = _check_count('k', k)
    if k > n:
        raise ValueError(f'cannot take a sample of {k} from {n} items without replacement')
    order, s = permutation(n, as_state(rng))
    return order[:k], s


def train_test_split_indices(
    n: int,
    rng: RNGLike = None,
    test_size: Union[float, int] = 0.2,
    shuffle: bool = True,
) -> Tuple[Tuple[np.ndarray, np.ndarray], RNGLike]:
    """Split ``range(n)`` into train and test indices.

    Parameters
    ----------
    n : int
        Number of rows.
    rng : None, int, SeedSequence or PCG64State, optional
        Randomness source for the shuffle.
    test_size : float or int, optional
        Fraction of rows in ``[0, 1]`` (rounded half up) or an absolute row
        count in ``[0, n]``. Defaults to ``0.2``.
    shuffle : bool, optional
        Shuffle before splitting. Without shuffling the test set is the
        trailing block, ``rng`` is not resolved and no draws are consumed.

    Returns
    -------
    (train, test) : tuple of numpy.ndarray
        Train is the leading block of the (shuffled) order, test the rest.
    state : PCG64State
        The advanced state, or ``rng`` returned as given when ``shuffle`` is
        false.

    Examples
    --------
    .. code-block:: python

        >>> import pcgrand
        >>> (train, test), _ = pcgrand.train_test_split_indices(10, 42, test_size=0.3)
        >>> len(train), len(test)
        (7, 3)
    """
    n = _check_count('n', n)
    if isinstance(test_size, (float, np.floating)):
        if not 0.0 <= test_size <= 1.0:
            raise ValueError(f'test_size must be in [0, 1] when given as a fraction, got {test_size}')
        test_count = _round_half_up(n * float(test_size))
    else:
        test_count = _check_count('test_size', test_size)
        if test_count > n:
            raise ValueError(f'test_size={test_count} is larger than the number of rows ({n})')

    if shuffle:
        order, rng = permutation(n, as_state(rng))
    else:
        order = np.arange(n, dtype=np.int64)
    train_count = n - test_count
    return (order[:train_count], order[train_count:]), rng


def k_fold_indices(
    n: int,
    rng: RNGLike = None,
    k: int = 5,
    shuffle: bool = True,
) -> Tuple[List[Tuple[np.ndarray, np.ndarray]], RNGLike]:
    """Build ``k`` cross-validation folds over ``range(n)``.

    Fold ``i`` tests on positions ``[i * (n // k), (i + 1) * (n // k))`` of
    the (shuffled) order and trains on every other position, so the
    ``n % k`` trailing positions are always in train.

    Returns
    -------
    folds : list of (train, test)
    state : PCG64State
        The advanced state, or ``rng`` returned as given when ``shuffle`` is
        false.

    Raises
    ------
    ValueError
        If ``k < 2`` or ``k > n``.
    """
    n = _check_count('n', n)
    k = _check_count('k', k)
    if k < 2:
        raise ValueError(f'k must be at least 2, got {k}')
    if k > n:
        raise ValueError(f'k={k} is larger than the number of rows ({n})')

    if shuffle:
        order, rng = permutation(n, as_state(rng))
    else:
        order = np.arange(n, dtype=np.int64)

    fold_size = n // k
    folds = []
    for i in range(k):
        start, stop = i * fold_size, (i + 1) * fold_size
        test = order[start:stop]
        train = np.concatenate([order[:start], order[stop:]])
        folds.append((train, test))
    return folds, rng


def _allocate(groups: Dict[Hashable, List[int]], total: int, size: int) -> Dict[Hashable, int]:
    counts = {label: _round_half_up(len(rows) / total * size) for label, rows in groups.items()}
    excess = sum(counts.values()) - size
    if excess > 0:
        for label in sorted(counts, key=lambda lb: -counts[lb]):
            if excess == 0:
                break
            cut = min(excess, counts[label])
            counts[label] -= cut
            excess -= cut
    return counts


def stratified_indices(
    labels: Sequence[Hashable],
    size: int,
    rng: RNGLike = None,
) -> Tuple[np.ndarray, PCG64State]:
    """Sample about ``size`` indices while preserving label proportions.

    Each stratum receives ``round(len(stratum) / len(labels) * size)``
    rows; when rounding overshoots ``size`` the largest strata give rows
    back first. Strata are visited in order of first appearance and each is
    sampled with :func:`sample_indices`, all from one state stream.

    Parameters
    ----------
    labels : sequence of hashable
        Stratum label of every row.
    size : int
        Requested sample size.
    rng : None, int, SeedSequence or PCG64State, optional

    Returns
    -------
    indices : numpy.ndarray
        Selected row indices, grouped by stratum.
    state : PCG64State
    """
    size = _check_count('size', size)
    s = as_state(rng)
    if len(labels) == 0:
        return np.zeros(0, dtype=np.int64), s

    groups: Dict[Hashable, List[int]] = {}
    for row, label in enumerate(labels):
        groups.setdefault(label, []).append(row)

    counts = _allocate(groups, len(labels), size)
    picked = []
    for label, rows in groups.items():
        take = min(counts[label], len(rows))
        chosen, s = sample_indices(len(rows), take, s)
        picked.append(np.asarray(rows, dtype=np.int64)[chosen])
    return np.concatenate(picked), s
