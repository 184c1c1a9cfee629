import dataclasses

import pytest

from did_key.errors import InvalidKeyPair, UnsupportedContentType
from did_key.models import (
    DID_LD_JSON,
    Base58KeyPair,
    DidGeneration,
    DidResolution,
    JsonWebKeyPair,
    ResolutionOptions,
    deserialize_key_pair,
)

JWK_PAIR = {
    "id": "did:example:123#key-0",
    "type": "JsonWebKey2020",
    "controller": "did:example:123",
    "publicKeyJwk": {"kty": "OKP", "crv": "Ed25519", "x": "AAAA"},
}
BASE58_PAIR = {
    "id": "did:example:123#key-0",
    "type": "Ed25519VerificationKey2018",
    "controller": "did:example:123",
    "publicKeyBase58": "FVen3X669xLzsi6N2V91DoiyzHzg1uAgqiT8jZ9nS96Z",
    "privateKeyBase58": "4qxhbHpzbt2q1xzXkZmWn6W9ZGdnq7bfRGPrhS4AWsGa",
}


def test_resolution_options():
    assert not ResolutionOptions().is_linked_data
    assert ResolutionOptions(DID_LD_JSON).is_linked_data
    with pytest.raises(UnsupportedContentType):
        ResolutionOptions("application/json")


def test_jwk_pair_serialize_omits_private():
    key = deserialize_key_pair(JWK_PAIR)
    assert isinstance(key, JsonWebKeyPair)
    assert key.private_key_jwk is None
    assert key.serialize() == JWK_PAIR


def test_base58_pair_serialize():
    key = deserialize_key_pair(BASE58_PAIR)
    assert isinstance(key, Base58KeyPair)
    assert key.serialize() == BASE58_PAIR


def test_key_pairs_frozen():
    key = deserialize_key_pair(JWK_PAIR)
    with pytest.raises(dataclasses.FrozenInstanceError):
        key.id = "did:example:456#key-0"


def test_both_encodings_rejected():
    with pytest.raises(InvalidKeyPair):
        deserialize_key_pair({**JWK_PAIR, "publicKeyBase58": "abc"})


def test_no_encoding_rejected():
    value = dict(JWK_PAIR)
    del value["publicKeyJwk"]
    with pytest.raises(InvalidKeyPair):
        deserialize_key_pair(value)


def test_missing_field_rejected():
    value = dict(BASE58_PAIR)
    del value["controller"]
    with pytest.raises(InvalidKeyPair):
        deserialize_key_pair(value)


def test_results_serialize():
    key = deserialize_key_pair(JWK_PAIR)
    generation = DidGeneration(did_document={"id": "did:example:123"}, keys=[key])
    assert generation.serialize() == {
        "didDocument": {"id": "did:example:123"},
        "keys": [JWK_PAIR],
    }

    resolution = DidResolution(did_document={"id": "did:example:123"})
    assert resolution.serialize() == {
        "didDocument": {"id": "did:example:123"},
        "didResolutionMetadata": {},
    }
