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
import re
import typing as t

from git.exc import InvalidGitRepositoryError, NoSuchPathError
from git.repo import Repo

SUBMODULE_SECTION_RE = re.compile(r'^submodule "(?P<name>.+)"$')


class RepoUtil:
    """
    Simple class for rolling up the git operations needed to manage submodules of a local repository.
    Use the load class method to create the object from any directory inside the working tree.
    """

    local_dir: str
    repo: Repo

    def __init__(self, logger: logging.Logger):
        """
        For internal use only, for creating RepoUtil objects, use the load class method.

        Arguments:
            :param logger   (logging.Logger) formated logger with the specified name
        """
        self.logger = logger

    @classmethod
    def load(cls, repo_dir: str, logger: logging.Logger) -> 'RepoUtil':
        """
        Load the git repository containing repo_dir into a Python object.
        Parent directories are searched, so repo_dir does not have to be the top-level directory.

        Arguments:
            :param repo_dir     (str) directory inside the working tree of the repository
            :param logger       (logging.Logger) formated logger with the specified name
        """
        repoutil = cls(logger)
        try:
            repoutil.repo = Repo(repo_dir, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError):
            raise InvalidGitRepositoryError(repo_dir)
        if repoutil.repo.working_tree_dir is None:
            raise InvalidGitRepositoryError(repo_dir)
        repoutil.local_dir = str(repoutil.repo.working_tree_dir)
        return repoutil

    def get_submodule_urls(self) -> dict[str, str]:
        """
        Get all submodules registered in the git configuration.

        :return (dict[str, str]) submodule names mapped to their configured URLs, in configuration order
        """
        submodules = {}
        with self.repo.config_reader() as config:
            for section in config.sections():
                match = SUBMODULE_SECTION_RE.match(section)
                if not match or not config.has_option(section, 'url'):
                    continue
                submodules.setdefault(match.group('name'), config.get_value(section, 'url'))
        return submodules

    def find_submodule_name(self, submodule_path: str) -> t.Optional[str]:
        """
        Find the configured name of the submodule registered under submodule_path, ignoring case.
        The whole name has to match, so a submodule named other/<submodule_path> is not found.

        Arguments:
            :param submodule_path   (str) path of the submodule relative to the repository root
            :return                 (Optional[str]) name of the first matching submodule
        """
        wanted = submodule_path.lower()
        for name in self.get_submodule_urls():
            if name.lower() == wanted:
                return name
        return None

    def deinit_submodule(self, name: str):
        self.logger.debug(f'git submodule deinit {name}')
        self.repo.git.submodule('deinit', name)

    def remove_path(self, path: str):
        """Forcibly remove path from the index and the working tree."""
        self.logger.debug(f'git rm -rf {path}')
        self.repo.git.rm('-rf', path)

    def add_submodule(self, url: str, path: str):
        """
        Register url as a submodule at path. The submodule is added even if path is ignored.

        Arguments:
            :param url      (str) URL of the submodule repository
            :param path     (str) path of the submodule relative to the repository root
        """
        self.logger.debug(f'git submodule add -f {url} {path}')
        self.repo.git.submodule('add', '-f', url, path)
