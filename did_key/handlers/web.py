"""did:key handler for NIST curve keys using Authlib."""

from typing import ClassVar, Mapping, Optional, Type

from authlib.jose import ECKey
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from did_key.errors import InvalidKeyPair
from did_key.handlers.base import JWS_2020_CONTEXT, BaseKeyPair, DIDKeyHandler
from did_key.models import JSON_OBJ, JSON_WEB_KEY_2020, GenerateOptions

DEFAULT_CURVE = "P-256"


def _without_kid(jwk: Mapping) -> JSON_OBJ:
    # Authlib adds a thumbprint kid to exported keys
    return {k: v for k, v in jwk.items() if k != "kid"}


class WebCryptoKeyPair(BaseKeyPair):
    """Key pair on one of the NIST curves.

    This class accepts any supported curve and hands back an instance of the
    curve specific subclass.
    """

    crv: ClassVar[Optional[str]] = None
    curve: ClassVar[Type[ec.EllipticCurve]]
    ld_type = JSON_WEB_KEY_2020
    ld_context = JWS_2020_CONTEXT

    def __init__(
        self, key: ECKey, id: Optional[str] = None, controller: Optional[str] = None
    ):
        """Initialize the WebCryptoKeyPair."""
        super().__init__(id, controller)
        self.key = key

    @classmethod
    def for_curve(cls, crv: Optional[str]) -> Type["WebCryptoKeyPair"]:
        """Return the key pair class for a JWK curve name."""
        for curve_cls in CURVES:
            if curve_cls.crv == crv:
                return curve_cls
        raise InvalidKeyPair(f"Unsupported curve: {crv}")

    @classmethod
    def generate(cls, options: GenerateOptions) -> "WebCryptoKeyPair":
        """Generate a key pair on the curve named by the options."""
        if options.kty not in (None, "EC"):
            raise InvalidKeyPair(f"Unsupported key type: {options.kty}")

        target = cls.for_curve(cls.crv or options.crv_or_size or DEFAULT_CURVE)
        return target(ECKey.generate_key(crv=target.crv, is_private=True))

    @classmethod
    def from_public_bytes(cls, public_bytes: bytes) -> "WebCryptoKeyPair":
        """Load a public key from its compressed point."""
        if not cls.crv:
            raise InvalidKeyPair("Curve required to load public key bytes")

        try:
            public_key = ec.EllipticCurvePublicKey.from_encoded_point(
                cls.curve(), public_bytes
            )
        except ValueError as err:
            raise InvalidKeyPair("Invalid public key") from err
        return cls(ECKey.import_key(public_key))

    @classmethod
    def from_jwk(
        cls, public_key_jwk: Mapping, private_key_jwk: Optional[Mapping] = None
    ) -> "WebCryptoKeyPair":
        """Load a key pair from JWKs."""
        jwk = _without_kid(private_key_jwk or public_key_jwk)
        if jwk.get("kty") != "EC":
            raise InvalidKeyPair(f"Unsupported key type: {jwk.get('kty')}")

        target = cls.for_curve(jwk.get("crv"))
        if private_key_jwk and (jwk.get("x"), jwk.get("y")) != (
            public_key_jwk.get("x"),
            public_key_jwk.get("y"),
        ):
            raise InvalidKeyPair("Public key does not match private key")

        try:
            key = ECKey.import_key(jwk)
        except Exception as err:
            raise InvalidKeyPair("Invalid JWK") from err
        return target(key)

    @property
    def public_bytes(self) -> bytes:
        """Return the compressed public point."""
        return self.key.get_public_key().public_bytes(
            serialization.Encoding.X962, serialization.PublicFormat.CompressedPoint
        )

    @property
    def has_private(self) -> bool:
        """Return whether the private component is present."""
        return not self.key.public_only

    def public_jwk(self) -> JSON_OBJ:
        """Return the public key as a JWK."""
        return _without_kid(self.key.as_dict(is_private=False))

    def private_jwk(self) -> JSON_OBJ:
        """Return the private key as a JWK."""
        return _without_kid(self.key.as_dict(is_private=True))


class P256KeyPair(WebCryptoKeyPair):
    """P-256 key pair."""

    crv = "P-256"
    curve = ec.SECP256R1
    codec = "p256-pub"


class P384KeyPair(WebCryptoKeyPair):
    """P-384 key pair."""

    crv = "P-384"
    curve = ec.SECP384R1
    codec = "p384-pub"


class P521KeyPair(WebCryptoKeyPair):
    """P-521 key pair."""

    crv = "P-521"
    curve = ec.SECP521R1
    codec = "p521-pub"


CURVES = (P256KeyPair, P384KeyPair, P521KeyPair)


class WebCryptoHandler(DIDKeyHandler):
    """did:key handler for P-256, P-384 and P-521 keys."""

    def __init__(self):
        """Initialize the handler."""
        super().__init__(WebCryptoKeyPair, CURVES)
