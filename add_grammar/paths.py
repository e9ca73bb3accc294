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
import os
import posixpath
from dataclasses import dataclass

from add_grammar.exceptions import SubmoduleExistsError
from utility.repoutil import RepoUtil
from utility.util import run_command


@dataclass
class RepoContext:
    root: str
    'Absolute path to the top-level directory of the working tree.'
    quiet: bool
    'Informational output of the script and of the called tools is suppressed.'
    repo: RepoUtil

    def resolve(self, command: str) -> str:
        """Commands with a directory part are relative to the repository root, bare names are looked up on PATH."""
        if '/' in command:
            return os.path.join(self.root, command)
        return command


def resolve_repo_context(current_dir: str, quiet: bool, logger: logging.Logger) -> RepoContext:
    """
    Locate the repository containing current_dir. Every following step runs from its top-level directory.

    Arguments:
        :param current_dir  (str) directory the script was started from
        :param quiet        (bool) suppress informational output
        :param logger       (logging.Logger) formated logger with the specified name
        :return             (RepoContext) context passed to the following steps
    """
    repo = RepoUtil.load(current_dir, logger)
    root = repo.local_dir
    if os.path.realpath(root) != os.path.realpath(current_dir):
        logger.info(f'Changing directory to {root}')
    return RepoContext(root=root, quiet=quiet, repo=repo)


def normalise_url(context: RepoContext, url: str, normaliser: str, logger: logging.Logger) -> str:
    """Canonicalise the URL to its HTTPS form with the normalisation helper of the repository."""
    output = run_command(
        [context.resolve(normaliser), '--protocol=https', url],
        context.root,
        logger,
        capture_output=True,
    )
    return output.strip()


def grammar_path(url: str, grammars_dir: str = 'vendor/grammars') -> str:
    """
    Derive the path of the submodule from the last segment of its URL,
    e.g. https://example.com/foo/bar.git -> vendor/grammars/bar
    """
    name = url.rstrip('/').rsplit('/', 1)[-1]
    if name.endswith('.git') and name != '.git':
        name = name[: -len('.git')]
    return posixpath.join(grammars_dir, name)


def ensure_path_free(context: RepoContext, path: str):
    if os.path.exists(os.path.join(context.root, path)):
        raise SubmoduleExistsError(path)

