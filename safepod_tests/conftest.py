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

import os
from collections import OrderedDict

import structlog

from safepod.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['SAFEPOD_CONFIG_YAML'] = os.environ.get('SAFEPOD_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)

# route structlog through the stdlib logging module, so events are filtered by level and never printed to stdout
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.KeyValueRenderer(),
    ],
    context_class=OrderedDict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)
