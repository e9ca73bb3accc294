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
import sys
import typing as t

FILE_FORMAT = '%(asctime)-15s %(levelname)-8s %(filename)s %(name)5s => %(message)s - %(lineno)d'
DATEFMT = '%Y-%m-%d %H:%M:%S'


class _BelowWarningFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def get_logger(
    name: str,
    file_name_path: t.Optional[str] = None,
    level: int = logging.DEBUG,
    quiet: bool = False,
    prog: t.Optional[str] = None,
) -> logging.Logger:
    """Create formated logger with the specified name. Informational records go to stdout and
    warnings with errors go to stderr, both prefixed with the program name. If 'file_name_path'
    is set, every record is also stored in that file.
        Arguments:
            :param name             (str) set name of the logger.
            :param file_name_path   (Optional[str]) filename and path where to save logs.
            :param level            (int) Optional - logging level of this logger.
            :param quiet            (bool) Optional - do not print informational records to stdout.
            :param prog             (Optional[str]) Optional - prefix of console messages, defaults to the logger name.
            :return a logger with the specified name.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    for old_handler in list(logger.handlers):
        logger.removeHandler(old_handler)
        old_handler.close()

    console_formatter = logging.Formatter(f'{prog or name}: %(message)s')
    if not quiet:
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setLevel(logging.INFO)
        stdout_handler.addFilter(_BelowWarningFilter())
        stdout_handler.setFormatter(console_formatter)
        logger.addHandler(stdout_handler)
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(console_formatter)
    logger.addHandler(stderr_handler)

    if file_name_path:
        if directory := os.path.dirname(file_name_path):
            os.makedirs(directory, exist_ok=True)
        exists = os.path.isfile(file_name_path)
        file_handler = logging.FileHandler(file_name_path)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, DATEFMT))
        logger.addHandler(file_handler)
        # if file didn t exist we create it and now we can set chmod
        if not exists:
            os.chmod(file_name_path, 0o664)
    return logger
