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

from enum import Enum

from safepod.serialization.types import ByteOrder
from safepod.utils.pydantic import BaseModel


class ZeroVariantPolicy(str, Enum):
    """ How a tagged union's zero value is chosen when no variant is explicitly designated."""

    # prefer the first variant whose tag is the representation's zero value, else the first declared variant
    SCAN = 'scan'

    # an explicit designation is required, its absence is a configuration error
    EXPLICIT = 'explicit'


class PodSettings(BaseModel):
    ZERO_VARIANT_POLICY: ZeroVariantPolicy = ZeroVariantPolicy.SCAN

    # Only used by the `to_bytes`/`from_bytes` shortcuts, the codec operations always take an explicit byte order.
    DEFAULT_BYTE_ORDER: ByteOrder = ByteOrder.LITTLE

    @classmethod
    def from_yaml(cls, *, filepath: str) -> 'PodSettings':
        """Takes a filepath to a yaml file and returns a validated PodSettings instance."""
        from safepod.utils.yaml import model_from_extended_yaml
        return model_from_extended_yaml(cls, filepath=filepath)
