# -*- coding: utf-8 -*-
#
# cosmsig - Cosmos SDK signature encoding
# Copyright (C) 2018-2024 The Electrum developers
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

import hashlib
from typing import Optional, Union, Tuple

import ecdsa
import ecdsa.numbertheory
from ecdsa.curves import SECP256k1
from ecdsa.der import UnexpectedDER
from ecdsa.keys import MalformedPointError
from ecdsa.util import sigencode_der, sigdecode_der, sigdecode_string

from .util import assert_bytes, FormatError


CURVE_ORDER = SECP256k1.order
SIG64_LENGTH = 64
SCALAR_LENGTH = 32


def string_to_number(b: bytes) -> int:
    return int.from_bytes(b, byteorder='big', signed=False)


def ecdsa_sig64_from_r_and_s(r: int, s: int) -> bytes:
    return (int.to_bytes(r, length=SCALAR_LENGTH, byteorder="big") +
            int.to_bytes(s, length=SCALAR_LENGTH, byteorder="big"))


def get_r_and_s_from_ecdsa_sig64(sig64: bytes) -> Tuple[int, int]:
    if not (isinstance(sig64, bytes) and len(sig64) == SIG64_LENGTH):
        raise FormatError("sig64 must be bytes, and 64 bytes exactly")
    r = string_to_number(sig64[:SCALAR_LENGTH])
    s = string_to_number(sig64[SCALAR_LENGTH:])
    return r, s


def strip_leading_zeros(b: bytes) -> bytes:
    """Minimal big endian encoding of an unsigned integer.

    Zero is encoded as a single 0x00 byte, never as an empty byte string.
    """
    stripped = bytes(b).lstrip(b'\x00')
    if not stripped:
        return b'\x00'
    return stripped


def unpack_fixed_length_signature(signature: bytes) -> Tuple[bytes, bytes]:
    """Splits a 64 byte signature into the unpadded big endian integers (r, s)."""
    if not (isinstance(signature, (bytes, bytearray)) and len(signature) == SIG64_LENGTH):
        raise FormatError("fixed length signature must be bytes, and 64 bytes exactly")
    r = strip_leading_zeros(signature[:SCALAR_LENGTH])
    s = strip_leading_zeros(signature[SCALAR_LENGTH:])
    return r, s


def _check_unpadded_scalar(name: str, b: bytes) -> None:
    if not isinstance(b, (bytes, bytearray)):
        raise FormatError(f"Unsigned integer {name} must be bytes, not {type(b).__name__}")
    if len(b) > SCALAR_LENGTH or len(b) == 0 or b[0] == 0x00:
        raise FormatError(f"Unsigned integer {name} must be encoded as unpadded big endian.")


class Secp256k1Signature:
    """An ECDSA signature over secp256k1 made of two unpadded big endian integers.

    Leading zero bytes are not accepted; use from_fixed_length() for the
    2x32 byte encoding. Zero is not a valid component and is rejected too.
    """

    def __init__(self, r: bytes, s: bytes):
        _check_unpadded_scalar('r', r)
        _check_unpadded_scalar('s', s)
        self._r = bytes(r)
        self._s = bytes(s)

    @classmethod
    def from_fixed_length(cls, sig64: bytes) -> 'Secp256k1Signature':
        r, s = unpack_fixed_length_signature(sig64)
        return cls(r, s)

    @classmethod
    def from_der(cls, der_sig: bytes) -> 'Secp256k1Signature':
        assert_bytes(der_sig)
        try:
            r, s = sigdecode_der(bytes(der_sig), CURVE_ORDER)
        except UnexpectedDER as e:
            raise FormatError(f"invalid DER signature: {der_sig.hex()}") from e
        try:
            sig64 = ecdsa_sig64_from_r_and_s(r, s)
        except OverflowError as e:
            raise FormatError("DER signature integers do not fit into 32 bytes") from e
        return cls.from_fixed_length(sig64)

    def r(self, length: Optional[int] = None) -> bytes:
        if length is None:
            return self._r
        return self._r.rjust(length, b'\x00')

    def s(self, length: Optional[int] = None) -> bytes:
        if length is None:
            return self._s
        return self._s.rjust(length, b'\x00')

    def to_fixed_length(self) -> bytes:
        return self.r(SCALAR_LENGTH) + self.s(SCALAR_LENGTH)

    def to_der(self) -> bytes:
        return sigencode_der(string_to_number(self._r), string_to_number(self._s), CURVE_ORDER)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Secp256k1Signature):
            return False
        return (self._r, self._s) == (other._r, other._s)

    def __hash__(self):
        return hash((self._r, self._s))

    def __repr__(self):
        return f"<Secp256k1Signature r={self._r.hex()} s={self._s.hex()}>"


class InvalidECPointException(Exception):
    """e.g. not on curve, or infinity"""


class ECPubkey(object):

    def __init__(self, b: bytes):
        assert isinstance(b, (bytes, bytearray)), f'pubkey must be bytes-like, not {type(b)}'
        try:
            self._verifying_key = ecdsa.VerifyingKey.from_string(bytes(b), curve=SECP256k1)
        except (MalformedPointError, ecdsa.numbertheory.Error, ValueError) as e:
            raise InvalidECPointException(
                f'public key could not be parsed or is invalid: {bytes(b).hex()!r}') from e

    def get_public_key_bytes(self, compressed=True) -> bytes:
        if compressed:
            return self._verifying_key.to_string("compressed")
        else:
            return self._verifying_key.to_string("uncompressed")

    def get_public_key_hex(self, compressed=True) -> str:
        return self.get_public_key_bytes(compressed).hex()

    def __repr__(self):
        return f"<ECPubkey {self.get_public_key_hex()}>"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ECPubkey):
            return False
        return self.get_public_key_bytes() == other.get_public_key_bytes()

    def __hash__(self):
        return hash(self.get_public_key_bytes())

    def ecdsa_verify(
        self,
        sig64: bytes,
        msg32: bytes,
        *,
        enforce_low_s: bool = True,  # consensus rule of the Cosmos SDK
    ) -> bool:
        assert_bytes(sig64)
        if len(sig64) != SIG64_LENGTH:
            return False
        if not (isinstance(msg32, bytes) and len(msg32) == 32):
            return False
        r, s = get_r_and_s_from_ecdsa_sig64(bytes(sig64))
        if not (0 < r < CURVE_ORDER and 0 < s < CURVE_ORDER):
            return False
        if enforce_low_s and s > CURVE_ORDER // 2:
            return False
        try:
            return self._verifying_key.verify_digest(bytes(sig64), msg32, sigdecode=sigdecode_string)
        except ecdsa.BadSignatureError:
            return False

    def verify_signature(self, sig: Secp256k1Signature, msg32: bytes, **kwargs) -> bool:
        return self.ecdsa_verify(sig.to_fixed_length(), msg32, **kwargs)

    @classmethod
    def is_pubkey_bytes(cls, b: bytes) -> bool:
        try:
            ECPubkey(b)
            return True
        except InvalidECPointException:
            return False


def is_secret_within_curve_range(secret: Union[int, bytes]) -> bool:
    if isinstance(secret, bytes):
        secret = string_to_number(secret)
    return 0 < secret < CURVE_ORDER


class ECPrivkey(ECPubkey):

    def __init__(self, privkey_bytes: bytes):
        assert_bytes(privkey_bytes)
        if len(privkey_bytes) != SCALAR_LENGTH:
            raise Exception('unexpected size for secret. should be 32 bytes, not {}'.format(len(privkey_bytes)))
        secret = string_to_number(privkey_bytes)
        if not is_secret_within_curve_range(secret):
            raise InvalidECPointException('Invalid secret scalar (not within curve order)')
        self.secret_scalar = secret
        self._signing_key = ecdsa.SigningKey.from_string(bytes(privkey_bytes), curve=SECP256k1)
        super().__init__(self._signing_key.get_verifying_key().to_string("compressed"))

    @classmethod
    def from_secret_scalar(cls, secret_scalar: int) -> 'ECPrivkey':
        secret_bytes = int.to_bytes(secret_scalar, length=SCALAR_LENGTH, byteorder='big', signed=False)
        return ECPrivkey(secret_bytes)

    def __repr__(self):
        return f"<ECPrivkey {self.get_public_key_hex()}>"

    def ecdsa_sign(self, msg32: bytes, *, sigencode=None):
        """Deterministic (RFC6979) signature with low-S, as required by the Cosmos SDK.

        Returns the 64 byte fixed length encoding, unless sigencode is given.
        """
        if not (isinstance(msg32, bytes) and len(msg32) == 32):
            raise Exception("msg32 to be signed must be bytes, and 32 bytes exactly")
        if sigencode is None:
            sigencode = ecdsa_sig64_from_r_and_s

        r, s = self._signing_key.sign_digest_deterministic(
            msg32, hashfunc=hashlib.sha256, sigencode=lambda r, s, order: (r, s))
        if s > CURVE_ORDER // 2:
            s = CURVE_ORDER - s

        sig64 = ecdsa_sig64_from_r_and_s(r, s)
        if not self.ecdsa_verify(sig64, msg32):
            raise Exception("sanity check failed: signature we just created does not verify!")

        return sigencode(r, s)
