"""Options, key pairs and results exchanged with did:key handlers."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional, Union

from did_key.errors import InvalidKeyPair, UnsupportedContentType

DID_JSON = "application/did+json"
DID_LD_JSON = "application/did+ld+json"
JSON_WEB_KEY_2020 = "JsonWebKey2020"

Accept = Literal["application/did+json", "application/did+ld+json"]
JSON_OBJ = Dict[str, Any]


@dataclass(frozen=True)
class ResolutionOptions:
    """Select the representation of a resolved or generated document."""

    accept: Accept = DID_JSON

    def __post_init__(self):
        """Reject unknown representations."""
        if self.accept not in (DID_JSON, DID_LD_JSON):
            raise UnsupportedContentType(
                f"Unsupported representation: {self.accept}"
            )

    @property
    def is_linked_data(self) -> bool:
        """Return whether the Linked-Data representation was requested."""
        return self.accept == DID_LD_JSON


@dataclass(frozen=True)
class GenerateOptions:
    """Options forwarded to a handler's generate.

    secure_random, when given, returns the seed the key is derived from.
    kty and crv_or_size select the curve for handlers that cannot use a seed.
    """

    secure_random: Optional[Callable[[], bytes]] = None
    kty: Optional[str] = None
    crv_or_size: Optional[str] = None


@dataclass(frozen=True)
class JsonWebKeyPair:
    """Key pair carrying JWK encoded key material."""

    id: str
    type: str
    controller: str
    public_key_jwk: JSON_OBJ
    private_key_jwk: Optional[JSON_OBJ] = None

    def serialize(self) -> JSON_OBJ:
        """Serialize to a JSON compatible dict."""
        value = {
            "id": self.id,
            "type": self.type,
            "controller": self.controller,
            "publicKeyJwk": dict(self.public_key_jwk),
        }
        if self.private_key_jwk is not None:
            value["privateKeyJwk"] = dict(self.private_key_jwk)
        return value


@dataclass(frozen=True)
class Base58KeyPair:
    """Key pair carrying base58 encoded key material."""

    id: str
    type: str
    controller: str
    public_key_base58: str
    private_key_base58: Optional[str] = None

    def serialize(self) -> JSON_OBJ:
        """Serialize to a JSON compatible dict."""
        value = {
            "id": self.id,
            "type": self.type,
            "controller": self.controller,
            "publicKeyBase58": self.public_key_base58,
        }
        if self.private_key_base58 is not None:
            value["privateKeyBase58"] = self.private_key_base58
        return value


KeyPair = Union[JsonWebKeyPair, Base58KeyPair]


def deserialize_key_pair(value: Mapping[str, Any]) -> KeyPair:
    """Load a key pair from its serialized form."""
    if "publicKeyJwk" in value and "publicKeyBase58" in value:
        raise InvalidKeyPair("Key pair must not carry both JWK and base58 keys")

    try:
        if "publicKeyJwk" in value:
            return JsonWebKeyPair(
                id=value["id"],
                type=value["type"],
                controller=value["controller"],
                public_key_jwk=dict(value["publicKeyJwk"]),
                private_key_jwk=value.get("privateKeyJwk"),
            )
        if "publicKeyBase58" in value:
            return Base58KeyPair(
                id=value["id"],
                type=value["type"],
                controller=value["controller"],
                public_key_base58=value["publicKeyBase58"],
                private_key_base58=value.get("privateKeyBase58"),
            )
    except KeyError as err:
        raise InvalidKeyPair(f"Key pair missing field: {err}") from err

    raise InvalidKeyPair("Key pair must carry a JWK or base58 public key")


@dataclass
class DidResolution:
    """Result of resolving a DID."""

    did_document: JSON_OBJ
    did_resolution_metadata: JSON_OBJ = field(default_factory=dict)

    def serialize(self) -> JSON_OBJ:
        """Serialize to a JSON compatible dict."""
        return {
            "didDocument": self.did_document,
            "didResolutionMetadata": self.did_resolution_metadata,
        }


@dataclass
class DidGeneration:
    """Result of generating or converting a DID."""

    did_document: JSON_OBJ
    keys: List[KeyPair]

    def serialize(self) -> JSON_OBJ:
        """Serialize to a JSON compatible dict."""
        return {
            "didDocument": self.did_document,
            "keys": [key.serialize() for key in self.keys],
        }
