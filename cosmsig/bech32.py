# Copyright (c) 2017 Pieter Wuille
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
# THE SOFTWARE.

"""Bech32 strings as used for Cosmos SDK addresses and public keys.

Cosmos uses the original Bech32 checksum only (never Bech32m) and carries
arbitrary byte payloads instead of a witness version + program.
"""

from typing import Optional, Sequence, NamedTuple, List

from .util import FormatError

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_CHARSET_INVERSE = {x: CHARSET.find(x) for x in CHARSET}

BECH32_CONST = 1

# BIP-173 limit. Cosmos tolerates longer strings for long payloads.
MAX_BECH32_LENGTH = 90


class DecodedBech32(NamedTuple):
    hrp: Optional[str]
    data: Optional[Sequence[int]]  # 5-bit ints


def bech32_polymod(values):
    """Internal function that computes the Bech32 checksum."""
    generator = [0x3b6a57b2, 0x26508e6d, 0x1ea119fa, 0x3d4233dd, 0x2a1462b3]
    chk = 1
    for value in values:
        top = chk >> 25
        chk = (chk & 0x1ffffff) << 5 ^ value
        for i in range(5):
            chk ^= generator[i] if ((top >> i) & 1) else 0
    return chk


def bech32_hrp_expand(hrp):
    """Expand the HRP into values for checksum computation."""
    return [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]


def bech32_verify_checksum(hrp, data) -> bool:
    return bech32_polymod(bech32_hrp_expand(hrp) + data) == BECH32_CONST


def bech32_create_checksum(hrp: str, data: List[int]) -> List[int]:
    values = bech32_hrp_expand(hrp) + data
    polymod = bech32_polymod(values + [0, 0, 0, 0, 0, 0]) ^ BECH32_CONST
    return [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]


def bech32_encode(hrp: str, data: List[int]) -> str:
    """Compute a Bech32 string given HRP and data values."""
    combined = data + bech32_create_checksum(hrp, data)
    return hrp + '1' + ''.join([CHARSET[d] for d in combined])


def bech32_decode(bech: str, *, ignore_long_length=False) -> DecodedBech32:
    """Validate a Bech32 string, and determine HRP and data.

    Returns (None, None) on any error, same as the BIP-173 reference code.
    """
    bech_lower = bech.lower()
    if bech_lower != bech and bech.upper() != bech:
        return DecodedBech32(None, None)
    pos = bech.rfind('1')
    if pos < 1 or pos + 7 > len(bech) or (not ignore_long_length and len(bech) > MAX_BECH32_LENGTH):
        return DecodedBech32(None, None)
    # check that HRP only consists of sane ASCII chars
    if any(ord(x) < 33 or ord(x) > 126 for x in bech[:pos+1]):
        return DecodedBech32(None, None)
    bech = bech_lower
    hrp = bech[:pos]
    try:
        data = [_CHARSET_INVERSE[x] for x in bech[pos+1:]]
    except KeyError:
        return DecodedBech32(None, None)
    if not bech32_verify_checksum(hrp, data):
        return DecodedBech32(None, None)
    return DecodedBech32(hrp=hrp, data=data[:-6])


def convertbits(data, frombits, tobits, pad=True):
    """General power-of-2 base conversion."""
    acc = 0
    bits = 0
    ret = []
    maxv = (1 << tobits) - 1
    max_acc = (1 << (frombits + tobits - 1)) - 1
    for value in data:
        if value < 0 or (value >> frombits):
            return None
        acc = ((acc << frombits) | value) & max_acc
        bits += frombits
        while bits >= tobits:
            bits -= tobits
            ret.append((acc >> bits) & maxv)
    if pad:
        if bits:
            ret.append((acc << (tobits - bits)) & maxv)
    elif bits >= frombits or ((acc << (tobits - bits)) & maxv):
        return None
    return ret


def encode_bech32_bytes(hrp: str, data: bytes) -> str:
    return bech32_encode(hrp, convertbits(data, 8, 5))


def decode_bech32_bytes(bech: str, *, hrp: Optional[str] = None, ignore_long_length=False) -> DecodedBech32:
    """Decode a bech32 string carrying a byte payload.

    Unlike bech32_decode, this raises FormatError instead of returning Nones.
    If hrp is given, the prefix of the string must match it.
    The returned data are bytes, not 5-bit ints.
    """
    if not isinstance(bech, str):
        raise FormatError(f"bech32 data must be a string, not {type(bech).__name__}")
    hrpgot, data = bech32_decode(bech, ignore_long_length=ignore_long_length)
    if hrpgot is None:
        raise FormatError(f"invalid bech32 string: {bech!r}")
    if hrp is not None and hrpgot != hrp:
        raise FormatError(f"unexpected bech32 prefix: got {hrpgot!r}, expected {hrp!r}")
    decoded = convertbits(data, 5, 8, False)
    if decoded is None:
        raise FormatError(f"invalid bech32 padding: {bech!r}")
    return DecodedBech32(hrp=hrpgot, data=bytes(decoded))
