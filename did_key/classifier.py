"""Select the key pair class that understands a verification method."""

import logging
from typing import Mapping, Tuple, Type

from did_key.errors import UnsupportedVerificationMethodType
from did_key.handlers.askar import (
    Bls12381G1KeyPair,
    Bls12381G2KeyPair,
    Ed25519KeyPair,
    Secp256k1KeyPair,
    X25519KeyPair,
)
from did_key.handlers.base import BaseKeyPair
from did_key.handlers.web import WebCryptoKeyPair
from did_key.models import JSON_OBJ, JSON_WEB_KEY_2020

LOG = logging.getLogger(__name__)

KTY_CRV_TO_KEY_PAIR: Mapping[Tuple[str, str], Type[BaseKeyPair]] = {
    ("EC", "secp256k1"): Secp256k1KeyPair,
    ("OKP", "Ed25519"): Ed25519KeyPair,
    ("OKP", "X25519"): X25519KeyPair,
    ("EC", "BLS12381_G1"): Bls12381G1KeyPair,
    ("EC", "BLS12381_G2"): Bls12381G2KeyPair,
}


def classify(verification_method: JSON_OBJ) -> Type[BaseKeyPair]:
    """Return the key pair class for a JsonWebKey2020 verification method.

    Any kty/crv pair not in the table is treated as a web crypto key.
    """
    vm_type = verification_method.get("type")
    if vm_type != JSON_WEB_KEY_2020:
        raise UnsupportedVerificationMethodType(
            f"Only {JSON_WEB_KEY_2020} can be classified, got {vm_type}"
        )

    jwk = verification_method.get("publicKeyJwk") or {}
    kty_crv = (jwk.get("kty"), jwk.get("crv"))
    key_pair_cls = KTY_CRV_TO_KEY_PAIR.get(kty_crv)
    if not key_pair_cls:
        LOG.debug("No key pair registered for %s, using web crypto", kty_crv)
        return WebCryptoKeyPair
    return key_pair_cls
