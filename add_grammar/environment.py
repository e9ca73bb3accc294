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
import shutil
import typing as t

from add_grammar.exceptions import MissingDependencyError
from utility.util import run_command


def find_missing_commands(commands: t.Iterable[str]) -> list[str]:
    return [command for command in commands if shutil.which(command) is None]


def check_dependencies(commands: t.Iterable[str], contributing_url: str):
    """
    Make sure every required command can be found on PATH.

    Arguments:
        :param commands         (Iterable[str]) names of the required commands
        :param contributing_url (str) link to the documentation describing how to install them
    """
    if missing := find_missing_commands(commands):
        raise MissingDependencyError(missing, contributing_url)


def check_container_engine(container_engine: str, logger: logging.Logger):
    """Query the container engine status. Raises subprocess.CalledProcessError if the daemon is not reachable."""
    run_command([container_engine, 'info'], os.getcwd(), logger, discard_stdout=True)
