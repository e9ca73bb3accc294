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
import subprocess
import unittest
from unittest import mock

from ddt import data, ddt, unpack

from add_grammar.exceptions import SubmoduleNotFoundError
from add_grammar.paths import RepoContext
from add_grammar.submodules import SubmoduleManager, normalise_submodule_token
from utility.create_config import create_config


@ddt
class TestSubmodulesClass(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.config = create_config()
        cls.logger = logging.getLogger('test_submodules')
        cls.logger.addHandler(logging.NullHandler())
        cls.logger.propagate = False

    def setUp(self):
        self.repo = mock.MagicMock()
        self.context = RepoContext(root='/repo', quiet=False, repo=self.repo)
        self.manager = SubmoduleManager(self.context, self.config, self.logger)
        patcher = mock.patch('add_grammar.submodules.run_command')
        self.run_command = patcher.start()
        self.addCleanup(patcher.stop)

    @data(
        ('foo', 'foo'),
        ('Foo', 'foo'),
        ('grammars/Foo', 'foo'),
        ('vendor/grammars/foo', 'foo'),
        ('./vendor/grammars/foo', 'foo'),
        ('/home/me/linguist/vendor/grammars/Language-Foo', 'language-foo'),
        ('other/foo', 'other/foo'),
    )
    @unpack
    def test_normalise_submodule_token(self, token: str, expected: str):
        self.assertEqual(normalise_submodule_token(token), expected)

    def test_replace(self):
        self.repo.find_submodule_name.return_value = 'vendor/grammars/Foo'

        name = self.manager.replace('vendor/grammars/FOO')

        self.assertEqual(name, 'vendor/grammars/Foo')
        self.repo.find_submodule_name.assert_called_once_with('vendor/grammars/foo')
        self.repo.deinit_submodule.assert_called_once_with('vendor/grammars/Foo')
        self.repo.remove_path.assert_called_once_with('vendor/grammars/Foo')
        self.run_command.assert_called_once_with(
            ['/repo/script/grammar-compiler', 'update', '-f'],
            '/repo',
            self.logger,
            discard_stdout=True,
            discard_stderr=True,
        )

    def test_replace_not_found(self):
        self.repo.find_submodule_name.return_value = None

        with self.assertRaises(SubmoduleNotFoundError) as cm:
            self.manager.replace('missing')

        self.assertEqual(cm.exception.exit_code, 1)
        self.assertEqual(cm.exception.msg, 'Submodule not found: missing')
        self.repo.deinit_submodule.assert_not_called()
        self.repo.remove_path.assert_not_called()
        self.run_command.assert_not_called()

    def test_replace_deinit_failure(self):
        self.repo.find_submodule_name.return_value = 'vendor/grammars/foo'
        self.repo.deinit_submodule.side_effect = RuntimeError('deinit failed')

        with self.assertRaises(RuntimeError):
            self.manager.replace('foo')

        self.repo.remove_path.assert_not_called()
        self.run_command.assert_not_called()

    def test_register(self):
        self.manager.register('https://github.com/foo/bar', 'vendor/grammars/bar')

        self.repo.add_submodule.assert_called_once_with('https://github.com/foo/bar', 'vendor/grammars/bar')
        self.run_command.assert_called_once_with(
            ['/repo/script/grammar-compiler', 'add', 'vendor/grammars/bar'],
            '/repo',
            self.logger,
            discard_stdout=False,
        )

    def test_register_quiet(self):
        self.context.quiet = True

        self.manager.register('https://github.com/foo/bar', 'vendor/grammars/bar')

        self.assertTrue(self.run_command.call_args.kwargs['discard_stdout'])

    def test_register_compiler_failure(self):
        self.run_command.side_effect = subprocess.CalledProcessError(2, ['script/grammar-compiler'])

        with self.assertRaises(subprocess.CalledProcessError):
            self.manager.register('https://github.com/foo/bar', 'vendor/grammars/bar')

        self.repo.add_submodule.assert_called_once()


if __name__ == '__main__':
    unittest.main()
