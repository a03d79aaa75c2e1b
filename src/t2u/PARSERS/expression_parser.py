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
Parser locating ``{operator?varlist}`` expressions in a URI template.
"""
import re
from typing import Iterator, List
from ..MODELS.expression import Expression, Operator

# Group 1: operator character, absent for simple expansion
# Group 2: comma separated variable names
EXPRESSION_PATTERN = re.compile(r'\{([+#./;?&])?([A-Za-z0-9_,%]+)\}')


class ExpressionParser:
    """
    Scanner for URI template expressions.

    Text that does not fit the grammar, such as ``{}`` or ``{x:3}``, is not
    reported and stays literal.
    """
    pattern = EXPRESSION_PATTERN

    def finditer(self, template: str) -> Iterator[Expression]:
        """
        Lazily yields the expressions of *template* from left to right.

        Args:
            template (str): The URI template.

        Returns:
            Iterator[Expression]: Matched expressions with their offsets.
        """
        for match in self.pattern.finditer(template):
            op_char = match.group(1)
            if op_char is None:
                operator = Operator.SIMPLE
            else:
                operator = Operator(op_char)

            yield Expression(
                operator=operator,
                variables=match.group(2).split(','),
                raw=match.group(0),
                start=match.start(),
                end=match.end(),
            )

    def parse_from_string(self, template: str) -> List[Expression]:
        """
        Parses all expressions of a template.

        Args:
            template (str): The URI template.

        Returns:
            List[Expression]: Expressions in template order.
        """
        return list(self.finditer(template))
