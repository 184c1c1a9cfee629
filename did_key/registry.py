"""Key type registry."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Tuple, Union

from did_key.errors import UnsupportedPrefix, UnsupportedType
from did_key.handlers.askar import (
    Bls12381G1KeyPair,
    Bls12381G2KeyPair,
    Bls12381Handler,
    Ed25519KeyPair,
    Secp256k1KeyPair,
    X25519KeyPair,
)
from did_key.handlers.base import DIDKeyHandler, Handler
from did_key.handlers.web import WebCryptoHandler

PREFIX_LENGTH = 12


class KeyTypeSpec(NamedTuple):
    """Key type details."""

    tag: str
    prefix: str
    generate: bool
    seed: bool


class KeyType(Enum):
    """Supported did:key key types."""

    ED25519 = KeyTypeSpec("ed25519", "did:key:z6Mk", True, True)
    X25519 = KeyTypeSpec("x25519", "did:key:z6LS", True, True)
    SECP256K1 = KeyTypeSpec("secp256k1", "did:key:zQ3s", True, True)
    SECP256R1 = KeyTypeSpec("secp256r1", "did:key:zDna", True, False)
    SECP384R1 = KeyTypeSpec("secp384r1", "did:key:z82L", True, False)
    SECP521R1 = KeyTypeSpec("secp521r1", "did:key:z2J9", True, False)
    BLS12381_G1 = KeyTypeSpec("bls12381-g1", "did:key:z3tE", True, True)
    BLS12381_G2 = KeyTypeSpec("bls12381-g2", "did:key:zUC7", True, True)
    BLS12381_G1G2 = KeyTypeSpec("bls12381-g1g2", "did:key:z5Tc", False, True)

    @property
    def tag(self) -> str:
        """Getter for the type tag."""
        return self.value.tag

    @property
    def prefix(self) -> str:
        """Getter for the 12 character DID prefix."""
        return self.value.prefix

    @property
    def supports_generate(self) -> bool:
        """Getter for whether keys of this type can be generated."""
        return self.value.generate

    @property
    def supports_seed(self) -> bool:
        """Getter for whether the handler can derive keys from a seed."""
        return self.value.seed

    @classmethod
    def from_tag(cls, tag: str) -> Optional["KeyType"]:
        """Get KeyType from its tag. Returns None if not found."""
        tag = TAG_ALIASES.get(tag, tag)
        for key_type in cls:
            if key_type.tag == tag:
                return key_type
        return None


TAG_ALIASES = {"bls12381": KeyType.BLS12381_G2.tag}


class Registry:
    """Immutable lookup of handlers by key type and DID prefix."""

    def __init__(self, handlers: Mapping[KeyType, Handler]):
        """Initialize the registry."""
        self._by_type = MappingProxyType(dict(handlers))
        self._by_prefix = MappingProxyType(
            {key_type.prefix: handler for key_type, handler in handlers.items()}
        )

    @property
    def key_types(self) -> Tuple[KeyType, ...]:
        """Return the registered key types."""
        return tuple(self._by_type)

    def handler_for_type(self, tag: Union[str, KeyType]) -> Handler:
        """Return the handler generating keys of a type."""
        key_type = tag if isinstance(tag, KeyType) else KeyType.from_tag(tag)
        if not key_type or not key_type.supports_generate:
            raise UnsupportedType(f"did:key does not support: {tag}")

        handler = self._by_type.get(key_type)
        if not handler:
            raise UnsupportedType(f"did:key does not support: {tag}")
        return handler

    def handler_for_prefix(self, prefix: str) -> Handler:
        """Return the handler resolving DIDs with a prefix."""
        handler = self._by_prefix.get(prefix)
        if not handler:
            raise UnsupportedPrefix(f"did:key does not support: {prefix}...")
        return handler

    @classmethod
    def default(cls) -> "Registry":
        """Build the registry of the bundled Askar and web crypto handlers."""
        web = WebCryptoHandler()
        bls12381_g2 = Bls12381Handler(Bls12381G2KeyPair)
        return cls(
            {
                KeyType.ED25519: DIDKeyHandler(Ed25519KeyPair),
                KeyType.X25519: DIDKeyHandler(X25519KeyPair),
                KeyType.SECP256K1: DIDKeyHandler(Secp256k1KeyPair),
                KeyType.SECP256R1: web,
                KeyType.SECP384R1: web,
                KeyType.SECP521R1: web,
                KeyType.BLS12381_G1: Bls12381Handler(Bls12381G1KeyPair),
                KeyType.BLS12381_G2: bls12381_g2,
                KeyType.BLS12381_G1G2: bls12381_g2,
            }
        )


_default_registry: Optional[Registry] = None


def default_registry() -> Registry:
    """Return the process wide registry, building it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = Registry.default()
    return _default_registry
