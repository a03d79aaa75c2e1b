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
Models for template expressions and their operators.
"""
from typing import List
from enum import Enum
from pydantic import BaseModel, ConfigDict


class Operator(str, Enum):
    """
    The leading character of an expression, selecting its expansion style.
    """
    SIMPLE = ""
    RESERVED = "+"
    FRAGMENT = "#"
    LABEL = "."
    PATH = "/"
    PATH_PARAM = ";"
    QUERY = "?"
    QUERY_CONTINUATION = "&"


class Expression(BaseModel):
    """
    A single ``{...}`` span matched in a template.
    """
    model_config = ConfigDict(frozen=True)

    operator: Operator = Operator.SIMPLE
    variables: List[str]

    # Source text and offsets, for replacement
    raw: str
    start: int
    end: int
