#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import re
from pathlib import Path

from setuptools import find_packages, setup

# read the version without importing the package, its dependencies may not be installed yet
_version_file = Path(__file__).parent / 'safepod' / 'version.py'
__version__ = re.search(r"__version__ = '([^']+)'", _version_file.read_text()).group(1)  # type: ignore[union-attr]

setup(
    name='safepod',
    version=__version__,
    description='Fixed-size binary codecs for plain-old-data values',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache License 2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(include=('safepod', 'safepod.*')),
    package_data={
        'safepod.conf': ['*.yml'],
    },
    install_requires=[
        'pydantic>=2',
        'PyYAML',
        'structlog',
        'typing_extensions>=4.10',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
