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

"""User-level configuration for pcgrand.

Stores user defaults (currently the default seed used when a sampling call
receives ``rng=None``) in a JSON file at a platform-appropriate location.
Supports atomic writes, schema versioning, and cached loading.

Config locations:
    - Linux:   ~/.config/pcgrand/defaults.json
    - macOS:   ~/Library/Application Support/pcgrand/defaults.json
    - Windows: %APPDATA%/pcgrand/defaults.json

The default seed is resolved in this order: a thread-local
:func:`seed_context` override, the process-wide :func:`set_default_seed`
value, the persisted ``default_seed`` user default, and finally ``None``
(fresh operating-system entropy).
"""

import json
import os
import platform
import tempfile
import warnings
from typing import Any, Dict, Optional

from ._config import check_seed, seed_context, seed_environ

__all__ = [
    'load_user_defaults',
    'save_user_defaults',
    'get_user_default',
    'set_user_default',
    'clear_user_defaults',
    'get_config_path',
    'invalidate_cache',
    'set_default_seed',
    'get_default_seed',
    'resolve_default_seed',
    'seed_context',
]

_SCHEMA_VERSION = 1
_SUPPORTED_SCHEMA_VERSIONS = {1}
_VALIDATORS = {
    'default_seed': check_seed,
}
_cache: Optional[Dict[str, Any]] = None


def get_config_path() -> str:
    """Return the platform-appropriate path for the pcgrand config file.

    Returns
    -------
    str
        Absolute path to the ``defaults.json`` configuration file.

    Notes
    -----
    The platform-specific base directories are:

    - **Windows**: ``%APPDATA%/pcgrand/defaults.json`` (falls back to
      ``~/pcgrand/defaults.json`` if ``APPDATA`` is not set).
    - **macOS**: ``~/Library/Application Support/pcgrand/defaults.json``.
    - **Linux / other**: ``$XDG_CONFIG_HOME/pcgrand/defaults.json`` (falls
      back to ``~/.config/pcgrand/defaults.json`` if ``XDG_CONFIG_HOME`` is
      not set).

    Examples
    --------
    .. code-block:: python

        >>> from pcgrand import config
        >>> path = config.get_config_path()  # doctest: +SKIP
        >>> print(path)  # e.g. '/home/user/.config/pcgrand/defaults.json'
    """
    system = platform.system()
    if system == 'Windows':
        base = os.environ.get('APPDATA', os.path.expanduser('~'))
    elif system == 'Darwin':
        base = os.path.join(os.path.expanduser('~'), 'Library', 'Application Support')
    else:
        base = os.environ.get('XDG_CONFIG_HOME', os.path.join(os.path.expanduser('~'), '.config'))
    return os.path.join(base, 'pcgrand', 'defaults.json')


def _empty_config() -> Dict[str, Any]:
    return {'schema_version': _SCHEMA_VERSION, 'defaults': {}}


def _validated_defaults(defaults: Any, path: str) -> Dict[str, Any]:
    """Drop unknown keys and invalid values, warning about each one."""
    if not isinstance(defaults, dict):
        warnings.warn(
            f"pcgrand: 'defaults' in {path} is not an object. Using built-in defaults.",
            stacklevel=4,
        )
        return {}
    result = {}
    for key, value in defaults.items():
        validator = _VALIDATORS.get(key)
        if validator is None:
            warnings.warn(f"pcgrand: Ignoring unknown config key {key!r} in {path}.", stacklevel=4)
            continue
        try:
            result[key] = validator(value)
        except (TypeError, ValueError) as e:
            warnings.warn(f"pcgrand: Ignoring invalid value for {key!r} in {path}: {e}.", stacklevel=4)
    return result


def _read_config_file(path: str) -> Dict[str, Any]:
    """Read and validate the JSON configuration file.

    Parameters
    ----------
    path : str
        Absolute path to the configuration file.

    Returns
    -------
    dict of str to any
        The parsed configuration dictionary. Returns an empty default
        structure (with ``schema_version`` and ``defaults`` keys) if the
        file is missing, corrupted, or has an unsupported schema version.
    """
    if not os.path.isfile(path):
        return _empty_config()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        warnings.warn(
            f"pcgrand: Corrupted config file at {path}: {e}. Using built-in defaults.",
            stacklevel=3,
        )
        return _empty_config()

    if not isinstance(data, dict):
        warnings.warn(
            f"pcgrand: Corrupted config file at {path}: top level is not an object. "
            f"Using built-in defaults.",
            stacklevel=3,
        )
        return _empty_config()

    schema_ver = data.get('schema_version', 0)
    if schema_ver not in _SUPPORTED_SCHEMA_VERSIONS:
        warnings.warn(
            f"pcgrand: Config file schema version {schema_ver} is not supported "
            f"(supported: {_SUPPORTED_SCHEMA_VERSIONS}). Ignoring user defaults.",
            stacklevel=3,
        )
        return _empty_config()

    data['defaults'] = _validated_defaults(data.get('defaults', {}), path)
    return data


def _write_config_file(path: str, data: Dict[str, Any]):
    """Atomically write the configuration dictionary to a JSON file.

    Uses a temporary file and ``os.replace`` so the config file is never
    left partially written.
    """
    config_dir = os.path.dirname(path)
    try:
        os.makedirs(config_dir, exist_ok=True)
    except OSError as e:
        warnings.warn(
            f"pcgrand: Cannot create config directory {config_dir}: {e}. "
            f"Default persistence skipped.",
            stacklevel=3,
        )
        return

    try:
        fd, tmp_path = tempfile.mkstemp(dir=config_dir, suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, sort_keys=True)
                f.write('\n')
            os.replace(tmp_path, path)
        except BaseException:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise
    except OSError as e:
        warnings.warn(
            f"pcgrand: Cannot write config file {path}: {e}. "
            f"Default persistence skipped.",
            stacklevel=3,
        )


def invalidate_cache():
    """Clear the in-memory configuration cache, forcing a re-read on next access.

    Useful after the config file has been modified by another process or
    by hand.
    """
    global _cache
    _cache = None


def load_user_defaults() -> Dict[str, Any]:
    """Load user defaults from the config file.

    Results are cached in memory; subsequent calls return the cached copy
    unless :func:`invalidate_cache` has been called.

    Returns
    -------
    dict of str to any
        Validated user defaults, e.g. ``{'default_seed': 42}``. Empty if
        nothing has been configured.
    """
    global _cache
    if _cache is None:
        _cache = _read_config_file(get_config_path())
    return _cache.get('defaults', {})


def save_user_defaults(defaults: Dict[str, Any]):
    """Merge ``defaults`` into the config file and write it atomically.

    Parameters
    ----------
    defaults : dict of str to any
        Keys and values to persist. Existing keys are overwritten.

    Raises
    ------
    KeyError
        If a key is not a known configuration key.
    TypeError, ValueError
        If a value is invalid for its key.

    Examples
    --------
    .. code-block:: python

        >>> from pcgrand import config
        >>> config.save_user_defaults({'default_seed': 42})  # doctest: +SKIP
    """
    global _cache
    checked = {}
    for key, value in defaults.items():
        if key not in _VALIDATORS:
            raise KeyError(f'Unknown config key {key!r}; known keys: {sorted(_VALIDATORS)}')
        checked[key] = _VALIDATORS[key](value)

    path = get_config_path()
    existing = _read_config_file(path)
    existing['defaults'].update(checked)
    existing['schema_version'] = _SCHEMA_VERSION
    _write_config_file(path, existing)
    _cache = existing


def get_user_default(key: str) -> Optional[Any]:
    """Return the persisted value for ``key``, or ``None`` if unset."""
    return load_user_defaults().get(key)


def set_user_default(key: str, value: Any):
    """Set and persist a single user default."""
    save_user_defaults({key: value})


def clear_user_defaults():
    """Remove all user defaults and delete the config file.

    A ``UserWarning`` is issued if the file cannot be deleted; the in-memory
    cache is cleared either way.
    """
    global _cache
    path = get_config_path()
    try:
        if os.path.isfile(path):
            os.unlink(path)
    except OSError as e:
        warnings.warn(
            f"pcgrand: Cannot delete config file {path}: {e}.",
            stacklevel=3,
        )
    _cache = None


_default_seed: Optional[int] = None


def set_default_seed(seed: Optional[int]):
    """Set the process-wide default seed, or ``None`` to unset it.

    Raises
    ------
    InvalidSeedError
        If ``seed`` is negative.
    TypeError
        If ``seed`` is not an integer or ``None``.

    Examples
    --------
    .. code-block:: python

        >>> from pcgrand import config
        >>> config.set_default_seed(7)
        >>> config.get_default_seed()
        7
    """
    global _default_seed
    _default_seed = None if seed is None else check_seed(seed)


def get_default_seed() -> Optional[int]:
    """Return the process-wide default seed set by :func:`set_default_seed`."""
    return _default_seed


def resolve_default_seed() -> Optional[int]:
    """Return the seed a call with ``rng=None`` should use, or ``None``.

    Checks, in order, the current thread's :func:`seed_context`, the
    process-wide default, and the persisted ``default_seed``.
    """
    if seed_environ.seed is not None:
        return seed_environ.seed
    if _default_seed is not None:
        return _default_seed
    return get_user_default('default_seed')
