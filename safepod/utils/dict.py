#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

from typing import Any, TypeVar

K = TypeVar('K')


def deep_merge(base: dict[K, Any], override: dict[K, Any]) -> dict[K, Any]:
    """
    Returns a new dict with the keys of `override` applied over `base`, nested dicts are merged key by key. Neither
    input is modified.

    >>> settings = dict(ZERO_VARIANT_POLICY='scan', DEFAULT_BYTE_ORDER='little')
    >>> deep_merge(settings, dict(DEFAULT_BYTE_ORDER='big'))
    {'ZERO_VARIANT_POLICY': 'scan', 'DEFAULT_BYTE_ORDER': 'big'}
    >>> settings['DEFAULT_BYTE_ORDER']
    'little'
    >>> deep_merge({'a': {'b': 1, 'c': 2}}, {'a': {'c': 3}})
    {'a': {'b': 1, 'c': 3}}
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged
