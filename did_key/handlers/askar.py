"""did:key handlers backed by Askar."""

import json
from typing import ClassVar, List, Mapping, Optional, Type

from aries_askar import AskarError, Key, KeyAlg
from aries_askar.types import SeedMethod

from did_key.errors import InvalidKeyPair
from did_key.handlers.base import BaseKeyPair, DIDKeyHandler
from did_key.models import JSON_OBJ, GenerateOptions
from did_key.multiformats.multibase import b58, b64url

JWK_FIELDS = ("kty", "crv", "x", "y", "d")

ED25519_SEED_LENGTH = 32
ED25519_KEYPAIR_LENGTH = 64


class AskarKeyPair(BaseKeyPair):
    """Key pair held in an Askar Key."""

    alg: ClassVar[KeyAlg]

    def __init__(
        self,
        key: Key,
        has_private: bool,
        id: Optional[str] = None,
        controller: Optional[str] = None,
    ):
        """Initialize a new AskarKeyPair instance."""
        super().__init__(id, controller)
        self.key = key
        self._has_private = has_private

    @classmethod
    def key_from_seed(cls, seed: bytes) -> Key:
        """Derive a key from seed bytes."""
        return Key.from_secret_bytes(cls.alg, seed)

    @classmethod
    def generate(cls, options: GenerateOptions) -> "AskarKeyPair":
        """Generate a key pair, from the options' seed when one is given."""
        try:
            if options.secure_random:
                key = cls.key_from_seed(options.secure_random())
            else:
                key = Key.generate(cls.alg)
        except AskarError as err:
            raise InvalidKeyPair(f"Error generating {cls.alg.value} key") from err
        return cls(key, True)

    @classmethod
    def from_public_bytes(cls, public_bytes: bytes) -> "AskarKeyPair":
        """Load a public key from its raw bytes."""
        try:
            key = Key.from_public_bytes(cls.alg, public_bytes)
        except AskarError as err:
            raise InvalidKeyPair("Invalid public key") from err
        return cls(key, False)

    @classmethod
    def from_secret_bytes(
        cls, secret: bytes, public_bytes: Optional[bytes] = None
    ) -> "AskarKeyPair":
        """Load a key pair from raw secret bytes.

        When public_bytes is given, it must match the public key derived
        from the secret.
        """
        try:
            key = Key.from_secret_bytes(cls.alg, secret)
        except AskarError as err:
            raise InvalidKeyPair("Invalid private key") from err

        if public_bytes is not None and key.get_public_bytes() != public_bytes:
            raise InvalidKeyPair("Public key does not match private key")
        return cls(key, True)

    @classmethod
    def from_base58(
        cls, public_key_base58: str, private_key_base58: Optional[str] = None
    ) -> "AskarKeyPair":
        """Load a key pair from base58 encoded keys."""
        try:
            public_bytes = b58.decode(public_key_base58)
            secret = b58.decode(private_key_base58) if private_key_base58 else None
        except ValueError as err:
            raise InvalidKeyPair("Invalid base58 key") from err

        if secret:
            return cls.from_secret_bytes(secret, public_bytes)
        return cls.from_public_bytes(public_bytes)

    @classmethod
    def from_jwk(
        cls, public_key_jwk: Mapping, private_key_jwk: Optional[Mapping] = None
    ) -> "AskarKeyPair":
        """Load a key pair from JWKs."""
        jwk = dict(private_key_jwk or public_key_jwk)
        if private_key_jwk and jwk.get("x") != public_key_jwk.get("x"):
            raise InvalidKeyPair("Public key does not match private key")

        try:
            key = Key.from_jwk({k: jwk[k] for k in JWK_FIELDS if k in jwk})
        except AskarError as err:
            raise InvalidKeyPair("Invalid JWK") from err

        if key.algorithm != cls.alg:
            raise InvalidKeyPair(
                f"Expected {cls.alg.value} key, got {key.algorithm.value}"
            )
        return cls(key, "d" in jwk)

    @property
    def public_bytes(self) -> bytes:
        """Return the raw public key bytes."""
        return self.key.get_public_bytes()

    @property
    def has_private(self) -> bool:
        """Return whether the private component is present."""
        return self._has_private

    def public_jwk(self) -> JSON_OBJ:
        """Return the public key as a JWK."""
        return json.loads(self.key.get_jwk_public())

    def private_jwk(self) -> JSON_OBJ:
        """Return the private key as a JWK."""
        return json.loads(self.key.get_jwk_secret())

    def private_bytes(self) -> bytes:
        """Return the raw private key bytes."""
        return self.key.get_secret_bytes()


class Ed25519KeyPair(AskarKeyPair):
    """Ed25519 key pair."""

    alg = KeyAlg.ED25519
    codec = "ed25519-pub"
    ld_type = "Ed25519VerificationKey2018"
    ld_context = "https://w3id.org/security/suites/ed25519-2018/v1"

    @classmethod
    def from_secret_bytes(
        cls, secret: bytes, public_bytes: Optional[bytes] = None
    ) -> "AskarKeyPair":
        """Load a key pair from a 32 byte seed or 64 byte seed and public key."""
        if len(secret) == ED25519_KEYPAIR_LENGTH:
            secret, trailing = (
                secret[:ED25519_SEED_LENGTH],
                secret[ED25519_SEED_LENGTH:],
            )
            if public_bytes is not None and trailing != public_bytes:
                raise InvalidKeyPair("Public key does not match private key")
            public_bytes = trailing
        return super().from_secret_bytes(secret, public_bytes)

    def private_bytes(self) -> bytes:
        """Return the seed followed by the public key."""
        return self.key.get_secret_bytes() + self.public_bytes


class X25519KeyPair(AskarKeyPair):
    """X25519 key pair."""

    alg = KeyAlg.X25519
    codec = "x25519-pub"
    ld_type = "X25519KeyAgreementKey2019"
    ld_context = "https://w3id.org/security/suites/x25519-2019/v1"
    relationships = ("keyAgreement",)


class Secp256k1KeyPair(AskarKeyPair):
    """secp256k1 key pair; public bytes are the compressed point."""

    alg = KeyAlg.K256
    codec = "secp256k1-pub"
    ld_type = "EcdsaSecp256k1VerificationKey2019"
    ld_context = "https://w3id.org/security/suites/secp256k1-2019/v1"


class Bls12381KeyPair(AskarKeyPair):
    """BLS12-381 key pair.

    JWKs use kty EC with the curve names BLS12381_G1 and BLS12381_G2.
    """

    jwk_crv: ClassVar[str]
    ld_context = "https://w3id.org/security/suites/bls12381-2020/v1"

    @classmethod
    def key_from_seed(cls, seed: bytes) -> Key:
        """Derive a key from seed bytes using BLS KeyGen."""
        return Key.from_seed(cls.alg, seed, method=SeedMethod.BlsKeyGen)

    @classmethod
    def from_jwk(
        cls, public_key_jwk: Mapping, private_key_jwk: Optional[Mapping] = None
    ) -> "AskarKeyPair":
        """Load a key pair from JWKs."""
        if (public_key_jwk.get("kty"), public_key_jwk.get("crv")) != (
            "EC",
            cls.jwk_crv,
        ):
            raise InvalidKeyPair(f"Expected {cls.jwk_crv} JWK")

        try:
            public_bytes = b64url.decode(public_key_jwk["x"])
            secret = (
                b64url.decode(private_key_jwk["d"])
                if private_key_jwk and "d" in private_key_jwk
                else None
            )
        except (KeyError, ValueError) as err:
            raise InvalidKeyPair("Invalid JWK") from err

        if secret:
            return cls.from_secret_bytes(secret, public_bytes)
        return cls.from_public_bytes(public_bytes)

    def public_jwk(self) -> JSON_OBJ:
        """Return the public key as a JWK."""
        return {
            "kty": "EC",
            "crv": self.jwk_crv,
            "x": b64url.encode(self.public_bytes),
        }

    def private_jwk(self) -> JSON_OBJ:
        """Return the private key as a JWK."""
        return {**self.public_jwk(), "d": b64url.encode(self.private_bytes())}


class Bls12381G1KeyPair(Bls12381KeyPair):
    """BLS12-381 G1 key pair."""

    alg = KeyAlg.BLS12_381_G1
    codec = "bls12_381-g1-pub"
    ld_type = "Bls12381G1Key2020"
    jwk_crv = "BLS12381_G1"


class Bls12381G2KeyPair(Bls12381KeyPair):
    """BLS12-381 G2 key pair."""

    alg = KeyAlg.BLS12_381_G2
    codec = "bls12_381-g2-pub"
    ld_type = "Bls12381G2Key2020"
    jwk_crv = "BLS12381_G2"


G1_PUBLIC_KEY_LENGTH = 48


class Bls12381Handler(DIDKeyHandler):
    """did:key handler for BLS12-381 keys.

    Combined G1G2 keys resolve to one verification method per group.
    """

    G1G2_CODEC = "bls12_381-g1g2-pub"

    def __init__(self, generates: Type[Bls12381KeyPair] = Bls12381G2KeyPair):
        """Initialize the handler."""
        super().__init__(generates, (Bls12381G1KeyPair, Bls12381G2KeyPair))

    def key_pairs_for(self, codec: str, key_bytes: bytes) -> List[BaseKeyPair]:
        """Load the public keys encoded in a fingerprint."""
        if codec == self.G1G2_CODEC:
            return [
                Bls12381G1KeyPair.from_public_bytes(key_bytes[:G1_PUBLIC_KEY_LENGTH]),
                Bls12381G2KeyPair.from_public_bytes(key_bytes[G1_PUBLIC_KEY_LENGTH:]),
            ]
        return super().key_pairs_for(codec, key_bytes)
