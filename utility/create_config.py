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

import os
import typing as t
from configparser import ConfigParser

CONFIG_PATH_ENV = 'ADD_GRAMMAR_CONFIG_PATH'

DEFAULT_CONFIG: dict[str, dict[str, str]] = {
    'General-Section': {
        'contributing-url': 'https://github.com/github-linguist/linguist/blob/main/CONTRIBUTING.md#dependencies',
    },
    'Directory-Section': {
        'grammars-dir': 'vendor/grammars',
        'licenses-config': 'vendor/licenses/config.yml',
        'logs': '',
    },
    'Tool-Section': {
        'required-commands': 'docker git sed bundle',
        'container-engine': 'docker',
        'bundler': 'bundle',
        'normalise-url': 'script/normalise-url',
        'grammar-compiler': 'script/grammar-compiler',
        'sort-submodules': 'script/sort-submodules',
        'list-grammars': 'script/list-grammars',
    },
}


def create_config(config_path: t.Optional[str] = None) -> ConfigParser:
    """Create a ConfigParser holding the built-in defaults, overlaid with the file at config_path.

    Arguments:
        :param config_path  (Optional[str]) path to an INI file, falls back to the
            ADD_GRAMMAR_CONFIG_PATH environment variable. A missing file leaves the defaults untouched.
        :return             (ConfigParser) the resulting configuration
    """
    config = ConfigParser(interpolation=None)
    config.read_dict(DEFAULT_CONFIG)
    config_path = config_path or os.environ.get(CONFIG_PATH_ENV)
    if config_path:
        config.read(config_path)
    return config
