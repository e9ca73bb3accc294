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
import shlex
import subprocess
import typing as t


def run_command(
    args: t.Sequence[str],
    cwd: str,
    logger: logging.Logger,
    capture_output: bool = False,
    discard_stdout: bool = False,
    discard_stderr: bool = False,
) -> str:
    """Run an external command and wait for it to finish.
    Raises subprocess.CalledProcessError if the command exits with a non-zero status.

    Arguments:
        :param args             (Sequence[str]) command and its arguments
        :param cwd              (str) directory to run the command in
        :param logger           (logging.Logger) formated logger with the specified name
        :param capture_output   (bool) collect stdout and return it instead of passing it through
        :param discard_stdout   (bool) send stdout to /dev/null, ignored if capture_output is set
        :param discard_stderr   (bool) send stderr to /dev/null
        :return                 (str) captured stdout, empty string when it was not captured
    """
    logger.debug(f'Running command: {shlex.join(args)} in {cwd}')
    if capture_output:
        stdout = subprocess.PIPE
    elif discard_stdout:
        stdout = subprocess.DEVNULL
    else:
        stdout = None
    stderr = subprocess.DEVNULL if discard_stderr else None
    result = subprocess.run(list(args), cwd=cwd, stdout=stdout, stderr=stderr, text=True, check=True)
    return result.stdout or ''
