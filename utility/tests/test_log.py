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

import io
import logging
import os
import shutil
import stat
import tempfile
import unittest
from unittest import mock

from utility.log import get_logger


class TestLogClass(unittest.TestCase):
    def setUp(self):
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        for patcher in (mock.patch('sys.stdout', self.stdout), mock.patch('sys.stderr', self.stderr)):
            patcher.start()
            self.addCleanup(patcher.stop)

    def _close(self, logger: logging.Logger):
        for handler in logger.handlers:
            handler.close()

    def test_console_output(self):
        logger = get_logger('test_log_console', prog='add-grammar')
        self.addCleanup(self._close, logger)

        logger.debug('debug message')
        logger.info('info message')
        logger.warning('warning message')
        logger.error('error message')

        self.assertEqual(self.stdout.getvalue(), 'add-grammar: info message\n')
        self.assertEqual(self.stderr.getvalue(), 'add-grammar: warning message\nadd-grammar: error message\n')

    def test_quiet(self):
        logger = get_logger('test_log_quiet', quiet=True, prog='add-grammar')
        self.addCleanup(self._close, logger)

        logger.info('info message')
        logger.error('error message')

        self.assertEqual(self.stdout.getvalue(), '')
        self.assertEqual(self.stderr.getvalue(), 'add-grammar: error message\n')

    def test_prefix_defaults_to_name(self):
        logger = get_logger('test_log_prefix')
        self.addCleanup(self._close, logger)

        logger.info('info message')

        self.assertEqual(self.stdout.getvalue(), 'test_log_prefix: info message\n')

    def test_handlers_are_replaced(self):
        get_logger('test_log_replace')
        logger = get_logger('test_log_replace', quiet=True)
        self.addCleanup(self._close, logger)

        self.assertEqual(len(logger.handlers), 1)
        self.assertFalse(logger.propagate)

    def test_file_output(self):
        directory = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, directory, ignore_errors=True)
        log_file = os.path.join(directory, 'logs', 'add-grammar.log')

        logger = get_logger('test_log_file', log_file, quiet=True)
        logger.debug('Running command: git status')
        self._close(logger)

        with open(log_file) as f:
            content = f.read()
        self.assertIn('DEBUG', content)
        self.assertIn('test_log_file => Running command: git status', content)
        self.assertEqual(stat.S_IMODE(os.stat(log_file).st_mode), 0o664)
        self.assertEqual(self.stdout.getvalue(), '')


if __name__ == '__main__':
    unittest.main()
