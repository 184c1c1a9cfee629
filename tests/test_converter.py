import pytest

from did_key.errors import (
    MissingKeyMaterial,
    MixedControllers,
    VerificationMethodNotFound,
)
from did_key.models import (
    DID_LD_JSON,
    Base58KeyPair,
    JsonWebKeyPair,
    ResolutionOptions,
)
from did_key.multiformats import multibase

ROUND_TRIP_TYPES = [
    "ed25519",
    "x25519",
    "secp256k1",
    "secp256r1",
    "secp384r1",
    "secp521r1",
    "bls12381-g1",
]


@pytest.mark.asyncio
async def test_json_to_linked_data(did_key):
    generated = await did_key.generate("ed25519")
    (key,) = generated.keys

    converted = await did_key.convert(generated.keys, ResolutionOptions(DID_LD_JSON))
    (ld_key,) = converted.keys

    assert isinstance(ld_key, Base58KeyPair)
    assert ld_key.type == "Ed25519VerificationKey2018"
    assert ld_key.id == key.id
    assert ld_key.controller == key.controller
    assert multibase.b58.decode(ld_key.public_key_base58) == multibase.b64url.decode(
        key.public_key_jwk["x"]
    )
    # seed followed by public key
    assert multibase.b58.decode(ld_key.private_key_base58) == (
        multibase.b64url.decode(key.private_key_jwk["d"])
        + multibase.b64url.decode(key.public_key_jwk["x"])
    )
    assert "@context" in converted.did_document
    assert converted.did_document["id"] == generated.did_document["id"]


@pytest.mark.parametrize("type", ROUND_TRIP_TYPES)
@pytest.mark.asyncio
async def test_round_trip(did_key, type):
    generated = await did_key.generate(type)
    (key,) = generated.keys

    linked_data = await did_key.convert(generated.keys, ResolutionOptions(DID_LD_JSON))
    back = await did_key.convert(linked_data.keys)
    (restored,) = back.keys

    assert isinstance(restored, JsonWebKeyPair)
    assert restored.id == key.id
    assert restored.public_key_jwk == key.public_key_jwk
    assert restored.private_key_jwk["d"] == key.private_key_jwk["d"]
    assert back.did_document == generated.did_document


@pytest.mark.asyncio
async def test_mixed_controllers(did_key):
    first = await did_key.generate("ed25519")
    second = await did_key.generate("ed25519")
    with pytest.raises(MixedControllers):
        await did_key.convert(first.keys + second.keys)


@pytest.mark.asyncio
async def test_no_keys(did_key):
    with pytest.raises(MissingKeyMaterial):
        await did_key.convert([])


@pytest.mark.asyncio
async def test_unknown_key_id(did_key):
    generated = await did_key.generate("x25519")
    (key,) = generated.keys
    stray = JsonWebKeyPair(
        id=f"{key.controller}#key-0",
        type=key.type,
        controller=key.controller,
        public_key_jwk=key.public_key_jwk,
        private_key_jwk=key.private_key_jwk,
    )
    with pytest.raises(VerificationMethodNotFound):
        await did_key.convert([stray])


@pytest.mark.asyncio
async def test_public_only_key(did_key):
    generated = await did_key.generate("ed25519")
    (key,) = generated.keys
    public = JsonWebKeyPair(
        id=key.id,
        type=key.type,
        controller=key.controller,
        public_key_jwk=key.public_key_jwk,
    )
    with pytest.raises(MissingKeyMaterial):
        await did_key.convert([public], ResolutionOptions(DID_LD_JSON))


@pytest.mark.asyncio
async def test_bls12381_g2_round_trip(did_key, bls12381_g2_options):
    generated = await did_key.generate("bls12381-g2", bls12381_g2_options)
    (key,) = generated.keys

    linked_data = await did_key.convert(generated.keys, ResolutionOptions(DID_LD_JSON))
    (ld_key,) = linked_data.keys
    assert isinstance(ld_key, Base58KeyPair)
    assert ld_key.type == "Bls12381G2Key2020"

    back = await did_key.convert(linked_data.keys)
    assert back.keys == [key]
    assert back.did_document == generated.did_document
