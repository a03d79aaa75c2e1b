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
Character sets from RFC 3986 used to pick an encoding policy per operator.
"""
import string

ALPHA = string.ascii_letters
DIGIT = string.digits
GEN_DELIMS = ":/?#[]@"
SUB_DELIMS = "!$&'()*+,;="

#: Never percent-encoded.
UNRESERVED = frozenset(ALPHA + DIGIT + "-._~")

#: Left unencoded by the ``+`` and ``#`` operators.
RESERVED = UNRESERVED | frozenset(GEN_DELIMS + SUB_DELIMS)


def is_unreserved(char: str) -> bool:
    """Return True if *char* is an unreserved character."""
    return char in UNRESERVED


def is_reserved(char: str) -> bool:
    """Return True if *char* is unreserved or URI syntax punctuation."""
    return char in RESERVED
