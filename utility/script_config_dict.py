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

import typing as t

from utility.scriptConfig import Arg


class BaseScriptConfigInfo(t.TypedDict):
    help: str


class ScriptConfigInfo(BaseScriptConfigInfo, total=False):
    args: t.Optional[list[Arg]]


script_config_dict: dict[str, ScriptConfigInfo] = {
    'add_grammar': {
        'help': (
            'Add a new grammar submodule under vendor/grammars, register it with the grammar compiler, '
            'cache its license and regenerate the grammar documentation.'
        ),
        'args': [
            {
                'flag': '-q',
                'flags': ['--quiet'],
                'help': 'Do not print informational messages. Options after this one are not parsed.',
                'action': 'store_true',
                'default': False,
                'terminates_options': True,
            },
            {
                'flag': '-r',
                'flags': ['--replace'],
                'help': 'Replace an existing grammar submodule.',
                'metavar': 'SUBMODULE',
                'type': str,
                'default': None,
            },
            {
                'flag': '--config-path',
                'help': 'Set path to config file',
                'type': str,
                'default': None,
            },
            {
                'flag': 'url',
                'help': 'URL of the grammar repository to add.',
                'type': str,
            },
        ],
    },
}
