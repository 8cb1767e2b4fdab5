from .version import COSMSIG_VERSION
from .util import CosmsigException, FormatError, UnsupportedTypeError
from .types import PubkeyType, PubKey, StdSignature
from .pubkey import encode_secp256k1_pubkey, decode_pubkey, encode_bech32_pubkey, decode_bech32_pubkey
from .address import pubkey_to_address, raw_secp256k1_pubkey_to_address
from .signature import (
    encode_secp256k1_signature,
    decode_signature,
    unpack_fixed_length_signature,
    make_secp256k1_signature_from_fixed_length,
)
from .ecc import Secp256k1Signature, ECPubkey, ECPrivkey
from . import constants
from .logging import get_logger


__version__ = COSMSIG_VERSION

_logger = get_logger(__name__)


# Ensure that asserts are enabled. Safety checks always raise explicitly,
# but a few internal sanity checks are asserts.
try:
    assert False  # noqa: B011
except AssertionError:
    pass
else:
    raise ImportError("Running with asserts disabled. Refusing to continue. Exiting...")
