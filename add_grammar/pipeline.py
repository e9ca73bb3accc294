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
from configparser import ConfigParser

from add_grammar.paths import RepoContext
from utility.util import run_command


class PostRegistrationPipeline:
    """
    Brings the generated files of the repository up to date after a grammar was added:
    cached licenses, the samples report with vendor/README.md, .gitmodules order and the grammar list.
    """

    def __init__(self, context: RepoContext, config: ConfigParser, logger: logging.Logger):
        self.context = context
        self.logger = logger
        self.bundler = context.resolve(config.get('Tool-Section', 'bundler'))
        self.licenses_config = config.get('Directory-Section', 'licenses-config')
        self.sort_submodules = context.resolve(config.get('Tool-Section', 'sort-submodules'))
        self.list_grammars = context.resolve(config.get('Tool-Section', 'list-grammars'))

    def __call__(self):
        self.cache_licenses()
        self.update_samples()
        self._run([self.sort_submodules])
        self._run([self.list_grammars])

    def cache_licenses(self):
        self.logger.info('Caching grammar license')
        self._run([self.bundler, 'exec', 'licensed', 'cache', '-c', self.licenses_config])

    def update_samples(self):
        self.logger.info('Updating grammar documentation in vendor/README.md')
        self._run([self.bundler, 'exec', 'rake', 'samples'], discard_stdout=True)

    def _run(self, args: list[str], discard_stdout: bool = False):
        run_command(args, self.context.root, self.logger, discard_stdout=discard_stdout or self.context.quiet)
