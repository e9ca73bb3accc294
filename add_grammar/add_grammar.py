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

"""
Script adds a grammar repository as a git submodule under vendor/grammars, optionally replacing a grammar
that is already registered. The new grammar is registered with the grammar compiler, its license is cached and
the generated grammar documentation is refreshed.
"""

__copyright__ = 'Copyright The IETF Trust 2026, All Rights Reserved'
__license__ = 'Apache License, Version 2.0'

import os
import shlex
import subprocess
import sys
import typing as t

# GitPython refuses to import without a git executable, the dependency check reports a missing git instead
os.environ.setdefault('GIT_PYTHON_REFRESH', 'quiet')

from git.exc import GitCommandError, InvalidGitRepositoryError

import utility.log as log
from add_grammar.environment import check_container_engine, check_dependencies
from add_grammar.exceptions import AddGrammarError
from add_grammar.paths import ensure_path_free, grammar_path, normalise_url, resolve_repo_context
from add_grammar.pipeline import PostRegistrationPipeline
from add_grammar.submodules import SubmoduleManager
from utility.create_config import create_config
from utility.script_config_dict import script_config_dict
from utility.scriptConfig import ScriptConfig

BASENAME = os.path.basename(__file__)
FILENAME = BASENAME.split('.py')[0]
PROG = 'add-grammar'


def main(arglist: t.Optional[list[str]] = None) -> int:
    script_conf = ScriptConfig(
        help=script_config_dict[FILENAME]['help'],
        args=script_config_dict[FILENAME]['args'],
        arglist=arglist,
        prog=PROG,
    )
    add_grammar = AddGrammar(script_conf)
    return add_grammar()


def cli():
    sys.exit(main())


class AddGrammar:
    def __init__(self, script_conf: ScriptConfig):
        self.args = script_conf.args
        self.config = create_config(self.args.config_path)
        self.quiet = self.args.quiet
        log_directory = self.config.get('Directory-Section', 'logs')
        self.logger = log.get_logger(
            'add_grammar',
            os.path.join(log_directory, 'add-grammar.log') if log_directory else None,
            quiet=self.quiet,
            prog=PROG,
        )

    def __call__(self) -> int:
        """Run all the steps, stop at the first failure and return the exit status of the script."""
        try:
            self._add_grammar()
        except AddGrammarError as e:
            self._log_error(e.msg)
            return e.exit_code
        except subprocess.CalledProcessError as e:
            self._log_error(f'Command failed with exit status {e.returncode}: {shlex.join(map(str, e.cmd))}')
            return e.returncode if e.returncode > 0 else 128 - e.returncode
        except InvalidGitRepositoryError as e:
            self._log_error(f'Not a git repository: {e}')
            return 128
        except GitCommandError as e:
            self._log_error(str(e).strip())
            return e.status if isinstance(e.status, int) and e.status > 0 else 1
        except OSError as e:
            self._log_error(f'{e.filename}: {e.strerror}' if e.filename else str(e))
            return 127 if isinstance(e, FileNotFoundError) else 126
        return 0

    def _add_grammar(self):
        tools = self.config['Tool-Section']
        check_dependencies(
            tools.get('required-commands').split(),
            self.config.get('General-Section', 'contributing-url'),
        )
        check_container_engine(tools.get('container-engine'), self.logger)

        context = resolve_repo_context(os.getcwd(), self.quiet, self.logger)
        url = normalise_url(context, self.args.url, tools.get('normalise-url'), self.logger)
        path = grammar_path(url, self.config.get('Directory-Section', 'grammars-dir'))
        ensure_path_free(context, path)

        submodules = SubmoduleManager(context, self.config, self.logger)
        if self.args.replace:
            submodules.replace(self.args.replace)
        submodules.register(url, path)

        PostRegistrationPipeline(context, self.config, self.logger)()

    def _log_error(self, message: str):
        for line in message.splitlines():
            self.logger.error(line)


if __name__ == '__main__':
    cli()
