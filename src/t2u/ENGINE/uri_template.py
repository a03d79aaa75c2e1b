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
Reusable, pre-parsed URI templates.
"""
from typing import Dict, Mapping, Optional, Tuple

from ..EXPANDERS.operator_expander import OperatorExpander
from ..MODELS.expression import Expression
from ..PARSERS.expression_parser import ExpressionParser


class UriTemplate:
    """
    A URI template parsed once and expanded many times.

    Examples:
        >>> tpl = UriTemplate("/users/{id}{?fields}")
        >>> tpl.variable_names
        ('id', 'fields')
        >>> tpl.expand(id="42", fields="name")
        '/users/42?fields=name'
    """

    def __init__(self, template: str):
        """
        Parses the template.

        Args:
            template: The URI template source.
        """
        self.template = template
        self.expressions: Tuple[Expression, ...] = tuple(ExpressionParser().finditer(template))

    @property
    def variable_names(self) -> Tuple[str, ...]:
        """Names used by the template, first occurrence order, no duplicates."""
        names: Dict[str, None] = {}
        for expression in self.expressions:
            for name in expression.variables:
                names.setdefault(name, None)
        return tuple(names)

    def expand(self, variables: Optional[Mapping[str, str]] = None, **kwargs: str) -> str:
        """
        Expands the template.

        Args:
            variables: Variable values keyed by name.
            **kwargs: Extra values, overriding entries of *variables*.

        Returns:
            The expanded URI.
        """
        merged = dict(variables or {})
        merged.update(kwargs)

        out = []
        pos = 0
        for expression in self.expressions:
            out.append(self.template[pos:expression.start])
            out.append(OperatorExpander.expand_expression(expression, merged))
            pos = expression.end
        out.append(self.template[pos:])
        return "".join(out)

    def __str__(self) -> str:
        return self.template

    def __repr__(self) -> str:
        return f"UriTemplate({self.template!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, UriTemplate):
            return self.template == other.template
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.template)
