# cosmsig - Cosmos SDK signature encoding
# Copyright (C) 2011 Thomas Voegtlin
# Copyright (C) 2024 The cosmsig developers
#
# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
import base64
import binascii
from typing import Any, Union


def inv_dict(d):
    return {v: k for k, v in d.items()}


class CosmsigException(Exception): pass


class FormatError(CosmsigException):
    """Input bytes or text do not match the expected fixed encoding."""


class UnsupportedTypeError(CosmsigException):
    """A typed public key carries a tag we do not handle."""

    def __init__(self, pubkey_type: Any):
        self.pubkey_type = pubkey_type
        super().__init__(f"Unsupported pubkey type: {pubkey_type!r}")


def assert_bytes(*args):
    """
    porting helper, assert args type
    """
    for x in args:
        assert isinstance(x, (bytes, bytearray)), type(x)


def to_bytes(something, encoding='utf8') -> bytes:
    """
    cast string to bytes() like object
    """
    if isinstance(something, bytes):
        return something
    if isinstance(something, str):
        return something.encode(encoding)
    elif isinstance(something, bytearray):
        return bytes(something)
    else:
        raise TypeError("Not a string or bytes like object")


bfh = bytes.fromhex


def to_base64(data: Union[bytes, bytearray]) -> str:
    assert_bytes(data)
    return base64.b64encode(bytes(data)).decode('ascii')


def from_base64(text: str) -> bytes:
    """Strict standard-alphabet base64 decoding.

    The URL-safe alphabet, missing padding and stray characters are all rejected.
    """
    if not isinstance(text, str):
        raise FormatError(f"base64 data must be a string, not {type(text).__name__}")
    try:
        return base64.b64decode(text.encode('ascii'), validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise FormatError(f"invalid base64 string: {text!r}") from e
