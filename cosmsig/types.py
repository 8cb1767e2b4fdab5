from enum import Enum
from typing import Any, Dict, Mapping, Optional

import attr

from .util import FormatError


class PubkeyType(str, Enum):
    """Amino type tags of public keys, as they appear on the wire.

    Listing a tag here does not mean it is supported; see pubkey.decode_pubkey.
    """
    SECP256K1 = "tendermint/PubKeySecp256k1"
    ED25519 = "tendermint/PubKeyEd25519"
    SR25519 = "tendermint/PubKeySr25519"

    @classmethod
    def from_tag(cls, tag: Any) -> Optional['PubkeyType']:
        """Exact, case-sensitive lookup. Returns None for anything unknown."""
        if not isinstance(tag, str):
            return None
        try:
            return cls(tag)
        except ValueError:
            return None


def _check_str_field(instance, attribute, value):
    if not isinstance(value, str):
        raise FormatError(f"{attribute.name} must be a string, not {type(value).__name__}")


@attr.s(frozen=True)
class PubKey:
    # the tag is kept verbatim (it may be None or unknown); dispatch happens in the decoders
    type = attr.ib()  # type: Any
    value = attr.ib(validator=_check_str_field)  # type: str

    def to_json(self) -> Dict[str, Any]:
        return {"type": self.type, "value": self.value}

    @classmethod
    def type_from_json(cls, d: Mapping[str, Any]) -> Any:
        """Reads only the type tag, so that keys with an unknown payload shape can be told apart."""
        if not isinstance(d, Mapping):
            raise FormatError(f"pub_key must be an object, not {type(d).__name__}")
        return d.get("type")

    @classmethod
    def from_json(cls, d: Mapping[str, Any]) -> 'PubKey':
        return PubKey(type=cls.type_from_json(d), value=d.get("value"))


@attr.s(frozen=True)
class StdSignature:
    """Signature envelope: typed public key plus base64 signature."""
    pub_key = attr.ib(validator=attr.validators.instance_of(PubKey))  # type: PubKey
    signature = attr.ib(validator=_check_str_field)  # type: str

    def to_json(self) -> Dict[str, Any]:
        return {
            "pub_key": self.pub_key.to_json(),
            "signature": self.signature,
        }

    @classmethod
    def pubkey_type_from_json(cls, d: Mapping[str, Any]) -> Any:
        if not isinstance(d, Mapping):
            raise FormatError(f"signature must be an object, not {type(d).__name__}")
        return PubKey.type_from_json(d.get("pub_key"))

    @classmethod
    def from_json(cls, d: Mapping[str, Any]) -> 'StdSignature':
        if not isinstance(d, Mapping):
            raise FormatError(f"signature must be an object, not {type(d).__name__}")
        return StdSignature(
            pub_key=PubKey.from_json(d.get("pub_key")),
            signature=d.get("signature"),
        )
