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

from pathlib import Path
from typing import Any, TypeVar, Union

import yaml
from pydantic import BaseModel

from safepod.utils.dict import deep_merge

_EXTENDS_KEY = 'extends'

M = TypeVar('M', bound=BaseModel)


def dict_from_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """ Read a yaml file that holds a mapping, an empty file is an empty mapping."""
    path = Path(filepath)
    if not path.is_file():
        raise ValueError(f"'{filepath}' is not a file")

    with path.open('r') as file:
        contents = yaml.safe_load(file)

    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' does not hold a mapping")
    return contents


def dict_from_extended_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """
    Read a yaml file that may name a base file with the 'extends' key, a relative base path is resolved from the
    extending file's directory. Keys of the extending file take precedence over the keys of its base, and the
    'extends' key itself is dropped.
    """
    chain: list[dict[str, Any]] = []
    seen: set[Path] = set()
    path: Path | None = Path(filepath).resolve()
    while path is not None:
        if path in seen:
            raise ValueError(f"'{path}' is extended recursively")
        seen.add(path)
        contents = dict_from_yaml(filepath=path)
        base = contents.pop(_EXTENDS_KEY, None)
        chain.append(contents)
        path = (path.parent / str(base)).resolve() if base else None

    merged: dict[str, Any] = {}
    for contents in reversed(chain):
        merged = deep_merge(merged, contents)
    return merged


def model_from_extended_yaml(model: type[M], *, filepath: Union[Path, str]) -> M:
    """ Read an extended yaml file and validate it with the given pydantic model."""
    return model.model_validate(dict_from_extended_yaml(filepath=filepath))
