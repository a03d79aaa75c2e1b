"""
Utilities for positional ``{0}``-style string interpolation.
"""
import re
from typing import Any, Sequence


class PositionalInterpolator:
    """
    Utility for substituting numbered placeholders in strings.
    Supports {0}, {1}, ... with no encoding applied.
    """
    pattern = re.compile(r'\{(\d+)\}')

    @staticmethod
    def interpolate(template: str, args: Sequence[Any]) -> str:
        """
        Replaces every {N} in the template with the N-th argument.

        :param template: The string containing {N} placeholders.
        :param args: The positional values.
        :return: The interpolated string. Placeholders without a matching
                 argument are left untouched.
        """
        def replace(match):
            """
            Internal replacement function for re.sub.
            """
            index = int(match.group(1))
            if index < len(args):
                return str(args[index])
            return match.group(0)

        return PositionalInterpolator.pattern.sub(replace, template)
