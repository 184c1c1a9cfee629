"""did:jwk document synthesis from generated keys."""

import dataclasses
import json
import logging
from typing import Optional, Union

from did_key.dispatch import Dispatcher
from did_key.errors import MissingKeyMaterial
from did_key.models import (
    JSON_OBJ,
    JSON_WEB_KEY_2020,
    DidGeneration,
    GenerateOptions,
    JsonWebKeyPair,
    ResolutionOptions,
)
from did_key.multiformats.multibase import b64url
from did_key.registry import KeyType

LOG = logging.getLogger(__name__)


def did_from_jwk(jwk: JSON_OBJ) -> str:
    """Encode a JWK as a did:jwk."""
    encoded = json.dumps(jwk, separators=(",", ":"))
    return f"did:jwk:{b64url.encode(encoded.encode())}"


def jwk_document(did: str, jwk: JSON_OBJ) -> JSON_OBJ:
    """Build the document of a did:jwk.

    The verification method is addressed by the DID itself.
    """
    return {
        "id": did,
        "verificationMethod": [
            {
                "id": did,
                "type": JSON_WEB_KEY_2020,
                "controller": did,
                "publicKeyJwk": jwk,
            }
        ],
        "authentication": [did],
        "capabilityInvocation": [did],
        "capabilityDelegation": [did],
        "keyAgreement": [did],
    }


async def generate2(
    dispatcher: Dispatcher,
    type: Union[str, KeyType],
    seed: Optional[str] = None,
    kid: Optional[str] = None,
    resolution_options: Optional[ResolutionOptions] = None,
) -> DidGeneration:
    """Generate a did:jwk.

    An explicit kid takes precedence over a kid inside the generated JWK.

    Args:
        dispatcher: dispatcher used to generate the key
        type: key type tag
        seed: hex encoded seed; a random key is generated when omitted
        kid: key id embedded in the JWK, overriding any kid the key carries
        resolution_options: representation requested from the handler

    Returns:
        The did:jwk document and its key, scoped to the did:jwk
    """
    if seed is not None:
        seed_bytes = bytes.fromhex(seed)
        options = GenerateOptions(secure_random=lambda: seed_bytes)
    else:
        options = GenerateOptions()

    generated = await dispatcher.generate(type, options, resolution_options)
    if not generated.keys:
        raise MissingKeyMaterial(f"No key generated for type {type}")

    key = generated.keys[0]
    if not isinstance(key, JsonWebKeyPair):
        raise MissingKeyMaterial(f"Generated {type} key has no publicKeyJwk")

    public_key_jwk = {k: v for k, v in key.public_key_jwk.items() if k != "kid"}
    kid = kid or key.public_key_jwk.get("kid") or key.controller.split(":")[-1]

    jwk = {"kid": kid, **public_key_jwk}
    did = did_from_jwk(jwk)
    LOG.debug("Generated did:jwk for %s key %s", type, kid)

    return DidGeneration(
        did_document=json.loads(json.dumps(jwk_document(did, jwk))),
        keys=[dataclasses.replace(key, id=did, controller=did)],
    )
