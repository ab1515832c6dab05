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


import threading
from contextlib import contextmanager
from typing import Optional

import numpy as np

from ._error import InvalidSeedError

__all__ = [
    'SeedEnvironment',
    'seed_environ',
    'seed_context',
    'check_seed',
]


def check_seed(seed) -> int:
    """Validate a default-seed value and return it as a plain ``int``."""
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise TypeError(f'default seed must be an integer, got {type(seed).__name__}')
    seed = int(seed)
    if seed < 0:
        raise InvalidSeedError(f'seed must be a non-negative integer, got {seed}')
    return seed


class SeedEnvironment(threading.local):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # per-thread override of the configured default seed
        self.seed: Optional[int] = None


seed_environ = SeedEnvironment()


@contextmanager
def seed_context(seed: Optional[int]):
    """
    Override the default seed for the current thread.

    Inside the block, functions that receive ``rng=None`` seed from ``seed``
    instead of the process or user default. Passing ``None`` removes an
    outer override for the duration of the block.
    """
    if seed is not None:
        seed = check_seed(seed)
    old_seed = seed_environ.seed
    try:
        seed_environ.seed = seed
        yield seed
    finally:
        seed_environ.seed = old_seed
