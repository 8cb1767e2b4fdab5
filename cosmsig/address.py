from typing import Optional

from . import constants
from .util import FormatError, UnsupportedTypeError
from .types import PubKey, PubkeyType
from .pubkey import COMPRESSED_PUBKEY_LENGTH, decode_pubkey
from .crypto import hash_160
from .bech32 import encode_bech32_bytes, decode_bech32_bytes


ADDRESS_HASH_LENGTH = 20


def raw_secp256k1_pubkey_to_address(pubkey: bytes, prefix: Optional[str] = None) -> str:
    if len(pubkey) != COMPRESSED_PUBKEY_LENGTH:
        raise FormatError(f"Invalid Secp256k1 pubkey length (compressed): {len(pubkey)}")
    if prefix is None:
        prefix = constants.net.BECH32_PREFIX
    return encode_bech32_bytes(prefix, hash_160(pubkey))


def pubkey_to_address(pubkey: PubKey, prefix: Optional[str] = None) -> str:
    pubkey_type = PubkeyType.from_tag(pubkey.type)
    if pubkey_type == PubkeyType.SECP256K1:
        return raw_secp256k1_pubkey_to_address(decode_pubkey(pubkey), prefix)
    else:
        raise UnsupportedTypeError(pubkey.type)


def address_to_hash(address: str, *, prefix: Optional[str] = None) -> bytes:
    if prefix is None:
        prefix = constants.net.BECH32_PREFIX
    _hrp, data = decode_bech32_bytes(address, hrp=prefix)
    if len(data) != ADDRESS_HASH_LENGTH:
        raise FormatError(f"unexpected address payload length: {len(data)} (should be {ADDRESS_HASH_LENGTH})")
    return data


def is_address(address: str, *, prefix: Optional[str] = None) -> bool:
    try:
        address_to_hash(address, prefix=prefix)
    except FormatError:
        return False
    return True
