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
URI template expansion over a whole template string.
"""
from typing import Mapping, Optional

from ..EXPANDERS.operator_expander import OperatorExpander
from ..PARSERS.expression_parser import ExpressionParser
from ..UTILS.logging_helpers import get_logger

logger = get_logger(__name__)


class TemplateEngine:
    """
    Replaces every expression of a template with its expansion.
    Literal text, including malformed expressions, is copied as is.
    """
    def __init__(self, parser: Optional[ExpressionParser] = None):
        """
        Initializes the engine.

        :param parser: Expression parser to use, a default one if omitted.
        """
        self.parser = parser or ExpressionParser()

    def interpolate(self, template: str, variables: Mapping[str, str]) -> str:
        """
        Expands *template* with *variables*.

        :param template: The URI template.
        :param variables: Variable values keyed by the names used in the template.
        :return: The expanded URI.
        """
        out = []
        pos = 0
        count = 0
        for expression in self.parser.finditer(template):
            out.append(template[pos:expression.start])
            out.append(OperatorExpander.expand_expression(expression, variables))
            pos = expression.end
            count += 1
        out.append(template[pos:])

        logger.debug("Expanded %d expression(s) in %r", count, template)
        return "".join(out)


_default_engine = TemplateEngine()


def interpolate(template: str, variables: Mapping[str, str]) -> str:
    """
    Expands an RFC 6570 (Level 3) URI template.

    >>> interpolate("/search{?q,lang}", {"q": "café au lait", "lang": "fr"})
    '/search?q=caf%C3%A9%20au%20lait&lang=fr'
    """
    return _default_engine.interpolate(template, variables)
