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

import logging
import posixpath
import re
from configparser import ConfigParser

from add_grammar.exceptions import SubmoduleNotFoundError
from add_grammar.paths import RepoContext
from utility.util import run_command

VENDOR_PREFIX_RE = re.compile(r'^(.*/)?vendor/')
GRAMMARS_PREFIX_RE = re.compile(r'^grammars/')


def normalise_submodule_token(token: str) -> str:
    """
    Reduce the value of --replace to the bare grammar name,
    e.g. ./vendor/grammars/Foo -> foo and grammars/foo -> foo
    """
    token = token.lower()
    token = VENDOR_PREFIX_RE.sub('', token)
    return GRAMMARS_PREFIX_RE.sub('', token)


class SubmoduleManager:
    """Deregisters an old grammar submodule and registers the new one, then tells the grammar compiler about it."""

    def __init__(self, context: RepoContext, config: ConfigParser, logger: logging.Logger):
        self.context = context
        self.logger = logger
        self.grammars_dir = config.get('Directory-Section', 'grammars-dir')
        self.grammar_compiler = context.resolve(config.get('Tool-Section', 'grammar-compiler'))

    def replace(self, submodule: str) -> str:
        """
        Deinitialize and remove the registered submodule matching the submodule token.
        Raises SubmoduleNotFoundError before touching the repository if nothing matches.

        Arguments:
            :param submodule    (str) name or path of the submodule, as passed to --replace
            :return             (str) configured name of the removed submodule
        """
        token = normalise_submodule_token(submodule)
        name = self.context.repo.find_submodule_name(posixpath.join(self.grammars_dir, token))
        if name is None:
            raise SubmoduleNotFoundError(submodule)
        self.logger.info(f'Deregistering: {name}')
        self.context.repo.deinit_submodule(name)
        self.context.repo.remove_path(name)
        run_command(
            [self.grammar_compiler, 'update', '-f'],
            self.context.root,
            self.logger,
            discard_stdout=True,
            discard_stderr=True,
        )
        return name

    def register(self, url: str, path: str):
        self.logger.info(f'Registering new submodule: {path}')
        self.context.repo.add_submodule(url, path)
        run_command(
            [self.grammar_compiler, 'add', path],
            self.context.root,
            self.logger,
            discard_stdout=self.context.quiet,
        )
