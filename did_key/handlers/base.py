"""Handler and key pair interfaces for did:key."""

from abc import ABC, abstractmethod
from typing import ClassVar, Dict, List, Mapping, Optional, Sequence, Tuple, Type

from pydid import DID

from did_key.errors import (
    InvalidDID,
    InvalidKeyPair,
    MissingKeyMaterial,
    UnsupportedVerificationMethodType,
)
from did_key.models import (
    JSON_OBJ,
    JSON_WEB_KEY_2020,
    Base58KeyPair,
    DidGeneration,
    DidResolution,
    GenerateOptions,
    JsonWebKeyPair,
    KeyPair,
    ResolutionOptions,
)
from did_key.multiformats import multibase, multicodec

DID_V1_CONTEXT = "https://www.w3.org/ns/did/v1"
JWS_2020_CONTEXT = "https://w3id.org/security/suites/jws-2020/v1"

RELATIONSHIPS = (
    "authentication",
    "capabilityInvocation",
    "capabilityDelegation",
    "keyAgreement",
)


class BaseKeyPair(ABC):
    """Key pair capability for one key family.

    Imports key pairs in either representation and exports the same key
    material as a JWK or base58 key pair.
    """

    codec: ClassVar[Optional[str]] = None
    ld_type: ClassVar[str]
    ld_context: ClassVar[str]
    relationships: ClassVar[Tuple[str, ...]] = RELATIONSHIPS

    def __init__(self, id: Optional[str] = None, controller: Optional[str] = None):
        """Initialize the key pair."""
        self._id = id
        self._controller = controller

    @classmethod
    @abstractmethod
    def generate(cls, options: GenerateOptions) -> "BaseKeyPair":
        """Generate a new key pair."""

    @classmethod
    @abstractmethod
    def from_public_bytes(cls, public_bytes: bytes) -> "BaseKeyPair":
        """Load a public key from its raw bytes."""

    @classmethod
    @abstractmethod
    def from_jwk(
        cls, public_key_jwk: Mapping, private_key_jwk: Optional[Mapping] = None
    ) -> "BaseKeyPair":
        """Load a key pair from JWKs."""

    @classmethod
    def from_base58(
        cls, public_key_base58: str, private_key_base58: Optional[str] = None
    ) -> "BaseKeyPair":
        """Load a key pair from base58 encoded keys."""
        raise UnsupportedVerificationMethodType(
            f"{cls.__name__} has no base58 representation"
        )

    @classmethod
    async def from_key_pair(cls, key_pair: KeyPair) -> "BaseKeyPair":
        """Import a key pair of either representation."""
        if isinstance(key_pair, JsonWebKeyPair):
            handle = cls.from_jwk(key_pair.public_key_jwk, key_pair.private_key_jwk)
        elif isinstance(key_pair, Base58KeyPair):
            handle = cls.from_base58(
                key_pair.public_key_base58, key_pair.private_key_base58
            )
        else:
            raise InvalidKeyPair(f"Unsupported key pair: {type(key_pair).__name__}")

        return handle.bind(key_pair.controller, key_pair.id)

    @property
    @abstractmethod
    def public_bytes(self) -> bytes:
        """Return the raw public key bytes used in the fingerprint."""

    @property
    @abstractmethod
    def has_private(self) -> bool:
        """Return whether the private component is present."""

    @abstractmethod
    def public_jwk(self) -> JSON_OBJ:
        """Return the public key as a JWK."""

    @abstractmethod
    def private_jwk(self) -> JSON_OBJ:
        """Return the private key as a JWK."""

    def private_bytes(self) -> bytes:
        """Return the raw private key bytes."""
        raise UnsupportedVerificationMethodType(
            f"{type(self).__name__} has no base58 representation"
        )

    @property
    def fingerprint(self) -> str:
        """Return the multibase encoded, multicodec prefixed public key."""
        if not self.codec:
            raise InvalidKeyPair(f"{type(self).__name__} has no multicodec")
        return multibase.encode(
            multicodec.wrap(self.codec, self.public_bytes), "base58btc"
        )

    @property
    def controller(self) -> str:
        """Return the DID controlling this key."""
        return self._controller or f"did:key:{self.fingerprint}"

    @property
    def id(self) -> str:
        """Return the verification method id of this key."""
        return self._id or f"{self.controller}#{self.fingerprint}"

    def bind(self, controller: str, id: Optional[str] = None) -> "BaseKeyPair":
        """Scope this key to a DID and verification method id."""
        self._controller = controller
        self._id = id
        return self

    def verification_method_type(self, resolution_options: ResolutionOptions) -> str:
        """Return the verification method type for a representation."""
        if resolution_options.is_linked_data:
            return self.ld_type
        return JSON_WEB_KEY_2020

    def key_pair(self, type: str, private_key: bool = False) -> KeyPair:
        """Render this key as a key pair of the given verification method type."""
        if private_key and not self.has_private:
            raise MissingKeyMaterial(f"No private key available for {self.id}")

        if type == JSON_WEB_KEY_2020:
            return JsonWebKeyPair(
                id=self.id,
                type=type,
                controller=self.controller,
                public_key_jwk=self.public_jwk(),
                private_key_jwk=self.private_jwk() if private_key else None,
            )

        if type == self.ld_type:
            return Base58KeyPair(
                id=self.id,
                type=type,
                controller=self.controller,
                public_key_base58=multibase.b58.encode(self.public_bytes),
                private_key_base58=(
                    multibase.b58.encode(self.private_bytes()) if private_key else None
                ),
            )

        raise UnsupportedVerificationMethodType(
            f"{self.__class__.__name__} cannot be exported as {type}"
        )

    async def export(self, type: str, private_key: bool = False) -> KeyPair:
        """Export the key material as a key pair of the given type."""
        return self.key_pair(type, private_key)

    def verification_method(self, type: str) -> JSON_OBJ:
        """Return the public verification method for this key."""
        return self.key_pair(type).serialize()


class Handler(ABC):
    """Generate and resolve DIDs for one key family."""

    @abstractmethod
    async def generate(
        self, options: GenerateOptions, resolution_options: ResolutionOptions
    ) -> DidGeneration:
        """Generate a DID document and its keys."""

    @abstractmethod
    async def resolve(
        self, did: str, resolution_options: ResolutionOptions
    ) -> DidResolution:
        """Resolve a DID to its document."""


class DIDKeyHandler(Handler):
    """did:key handler built from key pair classes."""

    def __init__(
        self,
        generates: Type[BaseKeyPair],
        resolves: Sequence[Type[BaseKeyPair]] = (),
    ):
        """Initialize the handler.

        Args:
            generates: key pair class used for generation
            resolves: additional key pair classes accepted on resolution
        """
        self.key_pair_cls = generates
        self.codecs: Dict[str, Type[BaseKeyPair]] = {
            cls.codec: cls for cls in (generates, *resolves) if cls.codec
        }

    async def generate(
        self, options: GenerateOptions, resolution_options: ResolutionOptions
    ) -> DidGeneration:
        """Generate a did:key and its key pair."""
        key = self.key_pair_cls.generate(options)
        document = self.build_document(key.controller, [key], resolution_options)
        exported = await key.export(
            key.verification_method_type(resolution_options), private_key=True
        )
        return DidGeneration(did_document=document, keys=[exported])

    async def resolve(
        self, did: str, resolution_options: ResolutionOptions
    ) -> DidResolution:
        """Resolve a did:key."""
        fingerprint = self.fingerprint_from_did(did)
        try:
            codec, key_bytes = multicodec.unwrap(multibase.decode(fingerprint))
        except ValueError as err:
            raise InvalidDID(f"Invalid did:key fingerprint: {fingerprint}") from err

        try:
            keys = self.key_pairs_for(codec.name, key_bytes)
        except InvalidKeyPair as err:
            raise InvalidDID(f"Invalid public key in {did}") from err

        for key in keys:
            key.bind(did)

        return DidResolution(
            did_document=self.build_document(did, keys, resolution_options),
            did_resolution_metadata={"contentType": resolution_options.accept},
        )

    @staticmethod
    def fingerprint_from_did(did: str) -> str:
        """Return the method specific id of a did:key."""
        if not DID.is_valid(did):
            raise InvalidDID(f"Invalid DID: {did}")

        parsed = DID(did)
        if parsed.method != "key":
            raise InvalidDID(f"Not a did:key: {did}")

        fingerprint = parsed.method_specific_id
        if not fingerprint.startswith(multibase.b58.character):
            raise InvalidDID(f"did:key must be base58btc encoded: {did}")
        return fingerprint

    def key_pairs_for(self, codec: str, key_bytes: bytes) -> List[BaseKeyPair]:
        """Load the public keys encoded in a fingerprint."""
        cls = self.codecs.get(codec)
        if not cls:
            raise InvalidDID(f"Unsupported key type for this handler: {codec}")
        return [cls.from_public_bytes(key_bytes)]

    @staticmethod
    def build_document(
        did: str, keys: Sequence[BaseKeyPair], resolution_options: ResolutionOptions
    ) -> JSON_OBJ:
        """Build the did:key document for the given keys."""
        methods = [
            key.verification_method(key.verification_method_type(resolution_options))
            for key in keys
        ]

        document: JSON_OBJ = {}
        if resolution_options.is_linked_data:
            contexts = dict.fromkeys(key.ld_context for key in keys)
            document["@context"] = [DID_V1_CONTEXT, *contexts]

        document["id"] = did
        document["verificationMethod"] = methods
        document.update(
            {
                rel: [
                    method["id"]
                    for key, method in zip(keys, methods)
                    if rel in key.relationships
                ]
                for rel in RELATIONSHIPS
            }
        )
        return document
