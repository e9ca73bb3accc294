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

import argparse
import sys
import typing as t
from copy import deepcopy

HELP_FLAGS = ('-h', '--help', '-?')


class BaseArg(t.TypedDict):
    flag: str
    help: str


class Arg(BaseArg, total=False):
    flags: t.List[str]
    default: t.Any
    type: type
    action: t.Literal['store_true', 'store_false']
    metavar: str
    terminates_options: bool


class ScriptConfig:
    """
    A class for setting configuration options of a script and parsing its command line.

    Option scanning ends at the first positional token or at an argument flagged with
    'terminates_options': every token after that point is treated as positional, the same
    way as tokens after '--'.
    """

    def __init__(
        self,
        help: str,
        args: t.Optional[list[Arg]],
        arglist: t.Optional[list[str]],
        prog: t.Optional[str] = None,
    ):
        # We need to make copies of data, so that we don't affect the original info,
        # that we used for ScriptConfig initialization.
        args = deepcopy(args) or []

        self.parser = argparse.ArgumentParser(prog=prog, description=help, add_help=False, allow_abbrev=False)
        self.parser.add_argument(*HELP_FLAGS, action='help', help='Show this help message and exit.')
        self.terminating_flags: set[str] = set()
        self.value_flags: set[str] = set()
        self._add_args(args)
        self.args = self.parser.parse_args(self._terminate_options(arglist))

    def _add_args(self, args: list[Arg]):
        for arg in args:
            flags = [arg.pop('flag'), *arg.pop('flags', [])]
            if arg.pop('terminates_options', False):
                self.terminating_flags.update(flags)
            if flags[0].startswith('-') and 'action' not in arg:
                self.value_flags.update(flags)
            self.parser.add_argument(*flags, **arg)

    def _terminate_options(self, arglist: t.Optional[list[str]]) -> list[str]:
        arglist = list(sys.argv[1:] if arglist is None else arglist)
        expects_value = False
        for index, token in enumerate(arglist):
            if expects_value:
                expects_value = False
                continue
            if token == '--':
                break
            if not token.startswith('-'):
                arglist.insert(index, '--')
                break
            if token in self.value_flags:
                expects_value = True
            elif token in self.terminating_flags:
                if arglist[index + 1:index + 2] != ['--']:
                    arglist.insert(index + 1, '--')
                break
        return arglist
