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
Expansion of a single expression, following the RFC 6570 operator rules
up to Level 3.

Every operator has its own handler. Undefined variables expand exactly like
variables bound to the empty string.
"""
from typing import Callable, Dict, Mapping, Sequence, Union

from ..MODELS.expression import Expression, Operator
from ..UTILS.logging_helpers import get_logger
from ..UTILS.percent_encoding import encode_reserved, encode_unreserved

logger = get_logger(__name__)

Handler = Callable[[Sequence[str], Mapping[str, str]], str]


def _lookup(variables: Mapping[str, str], name: str) -> str:
    """
    Resolves *name* by its raw spelling. Missing names and None give "".
    """
    value = variables.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        return str(value)
    return value


def _values(names: Sequence[str], variables: Mapping[str, str], encoder: Callable[[str], str]):
    return [encoder(_lookup(variables, name)) for name in names]


def _pairs(names: Sequence[str], variables: Mapping[str, str]):
    return [(name, encode_unreserved(_lookup(variables, name))) for name in names]


def expand_simple(names: Sequence[str], variables: Mapping[str, str]) -> str:
    """``{x,y}``"""
    return ",".join(_values(names, variables, encode_unreserved))


def expand_reserved(names: Sequence[str], variables: Mapping[str, str]) -> str:
    """``{+x,y}``"""
    return ",".join(_values(names, variables, encode_reserved))


def expand_fragment(names: Sequence[str], variables: Mapping[str, str]) -> str:
    """``{#x,y}``"""
    return "#" + ",".join(_values(names, variables, encode_reserved))


def expand_label(names: Sequence[str], variables: Mapping[str, str]) -> str:
    """``{.x,y}``"""
    return "." + ".".join(_values(names, variables, encode_unreserved))


def expand_path(names: Sequence[str], variables: Mapping[str, str]) -> str:
    """``{/x,y}``"""
    return "/" + "/".join(_values(names, variables, encode_unreserved))


def expand_path_param(names: Sequence[str], variables: Mapping[str, str]) -> str:
    """``{;x,y}``, an empty value drops the ``=``."""
    parts = []
    for name, value in _pairs(names, variables):
        parts.append(f"{name}={value}" if value else name)
    return ";" + ";".join(parts)


def expand_query(names: Sequence[str], variables: Mapping[str, str]) -> str:
    """``{?x,y}``"""
    return "?" + "&".join(f"{name}={value}" for name, value in _pairs(names, variables))


def expand_query_continuation(names: Sequence[str], variables: Mapping[str, str]) -> str:
    """``{&x,y}``"""
    return "&" + "&".join(f"{name}={value}" for name, value in _pairs(names, variables))


HANDLERS: Dict[Operator, Handler] = {
    Operator.SIMPLE: expand_simple,
    Operator.RESERVED: expand_reserved,
    Operator.FRAGMENT: expand_fragment,
    Operator.LABEL: expand_label,
    Operator.PATH: expand_path,
    Operator.PATH_PARAM: expand_path_param,
    Operator.QUERY: expand_query,
    Operator.QUERY_CONTINUATION: expand_query_continuation,
}


class OperatorExpander:
    """
    Dispatches an expression to the handler of its operator.
    """

    @staticmethod
    def expand(operator: Union[Operator, str], names: Sequence[str], variables: Mapping[str, str]) -> str:
        """
        Expands one expression.

        :param operator: The operator, or its character ("" for simple expansion).
        :param names: Variable names in declaration order.
        :param variables: Variable values keyed by raw name.
        :return: The expanded text, or "" for an unrecognised operator.
        """
        try:
            operator = Operator(operator)
        except ValueError:
            logger.debug("Unrecognised operator %r, expanding to empty string", operator)
            return ""
        return HANDLERS[operator](names, variables)

    @staticmethod
    def expand_expression(expression: Expression, variables: Mapping[str, str]) -> str:
        """
        Expands a parsed expression.

        :param expression: The matched expression.
        :param variables: Variable values keyed by raw name.
        :return: The expanded text.
        """
        return OperatorExpander.expand(expression.operator, expression.variables, variables)
