# Copyright The IETF Trust 2026, All Rights Reserved
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

__copyright__ = 'Copyright The IETF Trust 2026, All Rights Reserved'
__license__ = 'Apache License, Version 2.0'

from setuptools import find_namespace_packages, setup

setup(
    name='add-grammar',
    version='1.0.0',
    packages=find_namespace_packages(
        include=['add_grammar', 'add_grammar.*', 'utility', 'utility.*'],
        exclude=['*.tests'],
    ),
    url='',
    license='Apache License, Version 2.0',
    description='Register third-party grammar repositories as git submodules of a grammar collection',
    python_requires='>=3.9',
    install_requires=['gitpython'],
    extras_require={'test': ['ddt', 'pytest']},
    entry_points={'console_scripts': ['add-grammar=add_grammar.add_grammar:cli']},
)
