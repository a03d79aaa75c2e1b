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
Byte-wise percent-encoding of substituted values.
"""
from typing import AbstractSet

from .charset import RESERVED, UNRESERVED


def encode(exempt: AbstractSet[str], value: str) -> str:
    """
    Percent-encode every character of *value* that is not in *exempt*.

    Characters outside the exempt set are UTF-8 encoded and each byte is
    written as ``%XX`` with upper-case hex digits, so a multi-byte character
    produces several escapes.

    :param exempt: Characters copied through unchanged.
    :param value: The string to encode.
    :return: The encoded string.
    """
    out = []
    for char in value:
        if char in exempt:
            out.append(char)
            continue
        # surrogatepass keeps lone surrogates encodable
        for byte in char.encode("utf-8", "surrogatepass"):
            out.append(f"%{byte:02X}")
    return "".join(out)


def encode_unreserved(value: str) -> str:
    """Encode everything except unreserved characters."""
    return encode(UNRESERVED, value)


def encode_reserved(value: str) -> str:
    """Encode everything except unreserved and reserved characters."""
    return encode(RESERVED, value)
