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
Logger naming and configuration for t2u.

Library modules only fetch loggers; handlers are installed by the CLI.
"""
import logging
import sys
from typing import Optional, TextIO

BASE_LOGGER = "t2u"


def setup_base_logger(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configures the base ``t2u`` logger once and returns it.

    :param level: Logging level for the base logger.
    :param stream: Output stream, stderr by default.
    :return: The configured base logger.
    """
    base = logging.getLogger(BASE_LOGGER)
    base.setLevel(level)
    if base.handlers:
        return base

    base.propagate = False
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)
    return base


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger namespaced under ``t2u``."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")
