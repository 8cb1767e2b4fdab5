"""Conversion between StdSignature envelopes and raw secp256k1 signature bytes.

An envelope looks like this on the wire:

    {"pub_key": {"type": "tendermint/PubKeySecp256k1", "value": <base64>},
     "signature": <base64 of r || s>}

The raw signature is always the 64 byte fixed length encoding: r and s as
32 byte big endian integers, concatenated.
"""

from typing import Mapping, NamedTuple, Union

from .util import FormatError, UnsupportedTypeError, to_base64, from_base64
from .types import PubkeyType, StdSignature
from .pubkey import encode_secp256k1_pubkey
from .ecc import Secp256k1Signature, SIG64_LENGTH, unpack_fixed_length_signature
from .logging import get_logger


_logger = get_logger(__name__)


class DecodedSignature(NamedTuple):
    pubkey: bytes
    signature: bytes


def encode_secp256k1_signature(pubkey: bytes, signature: bytes) -> StdSignature:
    """Takes a binary pubkey and signature to create a signature envelope.

    pubkey: a compressed secp256k1 public key
    signature: a 64 byte fixed length representation of the secp256k1 signature components r and s
    """
    if not isinstance(signature, (bytes, bytearray)):
        raise FormatError(f"signature must be bytes, not {type(signature).__name__}")
    if len(signature) != SIG64_LENGTH:
        raise FormatError(
            f"Signature must be 64 bytes long, got {len(signature)}. Cosmos SDK uses a 2x32 byte "
            f"fixed length encoding for the secp256k1 signature integers r and s.")
    return StdSignature(
        pub_key=encode_secp256k1_pubkey(pubkey),
        signature=to_base64(signature),
    )


def decode_signature(signature: Union[StdSignature, Mapping]) -> DecodedSignature:
    """Returns the raw pubkey and raw signature of an envelope.

    Only secp256k1 keys are accepted. The signature length is not checked here.
    """
    if isinstance(signature, StdSignature):
        tag = signature.pub_key.type
    else:
        # dispatch before the payload is validated; other key types carry other payloads
        tag = StdSignature.pubkey_type_from_json(signature)
    pubkey_type = PubkeyType.from_tag(tag)
    # note: please don't add cases here without writing additional unit tests
    if pubkey_type == PubkeyType.SECP256K1:
        if not isinstance(signature, StdSignature):
            signature = StdSignature.from_json(signature)
        return DecodedSignature(
            pubkey=from_base64(signature.pub_key.value),
            signature=from_base64(signature.signature),
        )
    else:
        _logger.info(f"rejecting signature with unsupported pubkey type {tag!r}")
        raise UnsupportedTypeError(tag)


def make_secp256k1_signature_from_fixed_length(signature: bytes) -> Secp256k1Signature:
    r, s = unpack_fixed_length_signature(signature)
    return Secp256k1Signature(r, s)
