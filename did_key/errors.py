"""did:key errors."""


class DIDKeyError(Exception):
    """Base class for errors raised by did_key."""


class UnsupportedType(DIDKeyError):
    """Requested key type has no registered handler."""


class UnsupportedPrefix(DIDKeyError):
    """A DID prefix matches no registered handler."""


class UnsupportedContentType(DIDKeyError):
    """Resolution requested an unknown representation."""


class UnsupportedVerificationMethodType(DIDKeyError):
    """Verification method type cannot be handled."""


class VerificationMethodNotFound(DIDKeyError):
    """A key id is missing from a resolved DID document."""


class MissingKeyMaterial(DIDKeyError):
    """A key or key field required for the operation is absent."""


class MixedControllers(DIDKeyError):
    """Keys passed for conversion belong to more than one DID."""


class InvalidDID(DIDKeyError):
    """The DID is malformed or does not encode a supported key."""


class InvalidKeyPair(DIDKeyError):
    """Key material could not be loaded."""
