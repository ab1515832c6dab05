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

# -*- coding: utf-8 -*-


__all__ = [
    'InvalidSeedError',
    'StateDeserializationError',
]


class InvalidSeedError(ValueError):
    """Raised when a seed or entropy word is negative.

    Seeds are arbitrary-precision non-negative integers. A negative value
    cannot be decomposed into unsigned 32-bit entropy words, so it is
    rejected at the call that introduced it instead of being coerced.

    Parameters
    ----------
    message : str
        A human-readable description including the offending value.

    See Also
    --------
    StateDeserializationError : Raised for malformed raw generator states.

    Notes
    -----
    Subclasses :class:`ValueError`, which is what NumPy's ``SeedSequence``
    raises for the same input, so callers catching ``ValueError`` keep
    working.

    Examples
    --------
    .. code-block:: python

        >>> import pcgrand
        >>> pcgrand.seed(-1)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        pcgrand.InvalidSeedError: seed must be a non-negative integer, got -1
    """
    __module__ = 'pcgrand'


class StateDeserializationError(ValueError):
    """Raised when a raw generator state cannot be reconstructed.

    Raw states come from two places: explicit ``(high, low)`` limbs passed
    to :func:`pcgrand.seed_from_raw` / :func:`pcgrand.initialize_raw`, and
    persisted state dictionaries passed to :func:`pcgrand.from_state_dict`.
    Wrong limb counts, limbs wider than 64 bits, 128-bit values out of range,
    an even increment, or a foreign bit-generator name all raise this error.

    Parameters
    ----------
    message : str
        A human-readable description of the malformed field.

    See Also
    --------
    InvalidSeedError : Raised for negative seeds.

    Examples
    --------
    .. code-block:: python

        >>> import pcgrand
        >>> pcgrand.seed_from_raw(0, 0, 0, 1 << 64)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        pcgrand.StateDeserializationError: inc_low must be an unsigned 64-bit integer, got 18446744073709551616
    """
    __module__ = 'pcgrand'
