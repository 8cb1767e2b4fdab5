from typing import Mapping, Union

from .util import FormatError, UnsupportedTypeError, bfh, inv_dict, to_base64, from_base64
from .types import PubKey, PubkeyType
from .bech32 import encode_bech32_bytes, decode_bech32_bytes
from .logging import get_logger


_logger = get_logger(__name__)


COMPRESSED_PUBKEY_LENGTH = 33

# amino prefix of each key type, followed by the length byte of the key
AMINO_PREFIX_LENGTH = 5
AMINO_PUBKEY_PREFIXES = {
    PubkeyType.SECP256K1: bfh("eb5ae98721"),
    PubkeyType.ED25519: bfh("1624de6420"),
}  # type: Mapping[PubkeyType, bytes]
AMINO_PUBKEY_PREFIXES_INV = inv_dict(AMINO_PUBKEY_PREFIXES)


def encode_secp256k1_pubkey(pubkey: bytes) -> PubKey:
    """Wrap a compressed secp256k1 public key into a typed public key."""
    if not isinstance(pubkey, (bytes, bytearray)):
        raise FormatError(f"pubkey must be bytes, not {type(pubkey).__name__}")
    if len(pubkey) != COMPRESSED_PUBKEY_LENGTH or pubkey[0] not in (0x02, 0x03):
        raise FormatError("Public key must be compressed secp256k1, i.e. 33 bytes starting with 0x02 or 0x03")
    return PubKey(type=PubkeyType.SECP256K1.value, value=to_base64(pubkey))


def decode_pubkey(pubkey: Union[PubKey, Mapping]) -> bytes:
    """Returns the raw key bytes of a typed public key."""
    tag = pubkey.type if isinstance(pubkey, PubKey) else PubKey.type_from_json(pubkey)
    pubkey_type = PubkeyType.from_tag(tag)
    # note: please don't add cases here without writing additional unit tests
    if pubkey_type == PubkeyType.SECP256K1:
        if not isinstance(pubkey, PubKey):
            pubkey = PubKey.from_json(pubkey)
        return from_base64(pubkey.value)
    else:
        _logger.info(f"rejecting pubkey with unsupported type {tag!r}")
        raise UnsupportedTypeError(tag)


def encode_bech32_pubkey(pubkey: PubKey, prefix: str) -> str:
    """Amino-encodes the key and wraps it in bech32, e.g. 'cosmospub1addwnpep...'"""
    pubkey_type = PubkeyType.from_tag(pubkey.type)
    if pubkey_type == PubkeyType.SECP256K1:
        raw = from_base64(pubkey.value)
        if len(raw) != COMPRESSED_PUBKEY_LENGTH:
            raise FormatError(f"unexpected secp256k1 pubkey length: {len(raw)} (should be {COMPRESSED_PUBKEY_LENGTH})")
        data = AMINO_PUBKEY_PREFIXES[pubkey_type] + raw
    else:
        raise UnsupportedTypeError(pubkey.type)
    return encode_bech32_bytes(prefix, data)


def decode_bech32_pubkey(bech: str) -> PubKey:
    _hrp, data = decode_bech32_bytes(bech)
    prefix = data[:AMINO_PREFIX_LENGTH]
    rest = data[AMINO_PREFIX_LENGTH:]
    pubkey_type = AMINO_PUBKEY_PREFIXES_INV.get(prefix)
    if pubkey_type == PubkeyType.SECP256K1:
        return encode_secp256k1_pubkey(rest)
    elif pubkey_type is not None:
        raise UnsupportedTypeError(pubkey_type.value)
    else:
        raise UnsupportedTypeError(prefix.hex())
