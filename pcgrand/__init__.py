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

__version__ = "0.0.1"

from . import config
from ._error import InvalidSeedError, StateDeserializationError
from ._pcg64 import (
    MULTIPLIER,
    PCG64State,
    advance,
    as_state,
    from_state_dict,
    initialize_raw,
    jumped,
    next32,
    next64,
    seed,
    seed_from_raw,
    seed_from_sequence,
    to_state_dict,
)
from ._sampler import random_interval
from ._sampling import (
    k_fold_indices,
    sample_indices,
    stratified_indices,
    train_test_split_indices,
)
from ._seed_sequence import SeedSequence, generate_pcg64_state
from ._shuffle import permutation, shuffle
from .config import seed_context

__all__ = [

    # --- seeding --- #
    'SeedSequence',
    'generate_pcg64_state',

    # --- generator state --- #
    'PCG64State',
    'MULTIPLIER',
    'seed',
    'seed_from_raw',
    'seed_from_sequence',
    'initialize_raw',
    'as_state',

    # --- drawing --- #
    'next64',
    'next32',
    'random_interval',
    'shuffle',
    'permutation',

    # --- jumping and persistence --- #
    'advance',
    'jumped',
    'to_state_dict',
    'from_state_dict',

    # --- index sampling --- #
    'sample_indices',
    'train_test_split_indices',
    'k_fold_indices',
    'stratified_indices',

    # --- configuration --- #
    'config',
    'seed_context',

    # --- errors --- #
    'InvalidSeedError',
    'StateDeserializationError',

]
