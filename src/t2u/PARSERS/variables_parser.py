# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
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
Parsers for template variable files (YAML, JSON and .env) and NAME=VALUE pairs.
"""
import os
import yaml
from dotenv import dotenv_values
from typing import Any, Dict, Iterable


class VariablesParser:
    """
    Parser producing flat string mappings of template variables.
    """
    def parse(self, path: str) -> Dict[str, str]:
        """
        Parses a variables file, choosing the format from its name.

        :param path: Path to a .env, YAML or JSON file.
        :return: Variable values keyed by name.
        :raises FileNotFoundError: If the file does not exist.
        :raises ValueError: If the file holds something other than scalar values.
        """
        if not os.path.isfile(path):
            raise FileNotFoundError(f"Variables file not found: {path}")

        if self._is_env_file(path):
            values = dotenv_values(path)
            return {key: value or "" for key, value in values.items()}

        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
        return self.parse_from_string(content)

    def parse_from_string(self, content: str) -> Dict[str, str]:
        """
        Parses YAML (or JSON) mapping text.

        :param content: The document text.
        :return: Variable values keyed by name.
        """
        data = yaml.safe_load(content)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Variables document must be a mapping, got {type(data).__name__}")

        return {str(key): self._to_string(str(key), value) for key, value in data.items()}

    def parse_pairs(self, pairs: Iterable[str]) -> Dict[str, str]:
        """
        Parses NAME=VALUE strings, splitting on the first '='.

        :param pairs: The pair strings, e.g. from the command line.
        :return: Variable values keyed by name.
        """
        variables = {}
        for pair in pairs:
            if '=' not in pair:
                raise ValueError(f"Expected NAME=VALUE, got {pair!r}")
            name, value = pair.split('=', 1)
            if not name:
                raise ValueError(f"Missing variable name in {pair!r}")
            variables[name] = value
        return variables

    @staticmethod
    def _is_env_file(path: str) -> bool:
        name = os.path.basename(path)
        return name.startswith('.env') or name.endswith('.env')

    @staticmethod
    def _to_string(name: str, value: Any) -> str:
        """
        Converts a scalar YAML value to its string form.
        """
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (list, dict)):
            raise ValueError(f"Variable {name!r} must be a scalar, got {type(value).__name__}")
        return str(value)
