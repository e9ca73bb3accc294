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

"""Errors that stop the grammar registration before or between external commands."""

__copyright__ = 'Copyright The IETF Trust 2026, All Rights Reserved'
__license__ = 'Apache License, Version 2.0'


class AddGrammarError(Exception):
    exit_code = 1

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg


class MissingDependencyError(AddGrammarError):
    def __init__(self, commands: list[str], contributing_url: str):
        self.commands = commands
        super().__init__(
            f'Missing required command(s): {", ".join(commands)}\n'
            f'See {contributing_url} for how to set up your environment.',
        )


class SubmoduleExistsError(AddGrammarError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f'Submodule already exists at {path}\nUse --replace to replace it with a different grammar.')


class SubmoduleNotFoundError(AddGrammarError):
    def __init__(self, submodule: str):
        self.submodule = submodule
        super().__init__(f'Submodule not found: {submodule}')
