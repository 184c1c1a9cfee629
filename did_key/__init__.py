"""did:key generation and resolution."""

from did_key.core import DIDKey, convert, generate, generate2, resolve
from did_key.errors import (
    DIDKeyError,
    InvalidDID,
    InvalidKeyPair,
    MissingKeyMaterial,
    MixedControllers,
    UnsupportedContentType,
    UnsupportedPrefix,
    UnsupportedType,
    UnsupportedVerificationMethodType,
    VerificationMethodNotFound,
)
from did_key.models import (
    Base58KeyPair,
    DidGeneration,
    DidResolution,
    GenerateOptions,
    JsonWebKeyPair,
    KeyPair,
    ResolutionOptions,
    deserialize_key_pair,
)
from did_key.registry import KeyType, Registry


__all__ = [
    "Base58KeyPair",
    "DIDKey",
    "DIDKeyError",
    "DidGeneration",
    "DidResolution",
    "GenerateOptions",
    "InvalidDID",
    "InvalidKeyPair",
    "JsonWebKeyPair",
    "KeyPair",
    "KeyType",
    "MissingKeyMaterial",
    "MixedControllers",
    "Registry",
    "ResolutionOptions",
    "UnsupportedContentType",
    "UnsupportedPrefix",
    "UnsupportedType",
    "UnsupportedVerificationMethodType",
    "VerificationMethodNotFound",
    "convert",
    "deserialize_key_pair",
    "generate",
    "generate2",
    "resolve",
]
