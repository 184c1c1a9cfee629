import pytest

import did_key
from did_key.errors import UnsupportedPrefix, UnsupportedType
from did_key.models import DID_LD_JSON, ResolutionOptions
from did_key.registry import KeyType

# bls12381-g2 is covered with a seeded key in test_bls12381_g2_generate_resolve
GENERATED_TYPES = [
    key_type
    for key_type in KeyType
    if key_type.supports_generate and key_type is not KeyType.BLS12381_G2
]


@pytest.mark.parametrize("key_type", GENERATED_TYPES)
@pytest.mark.parametrize("accept", ["application/did+json", DID_LD_JSON])
@pytest.mark.asyncio
async def test_generate_resolve(key_type, accept):
    options = ResolutionOptions(accept)
    generated = await did_key.generate(key_type.tag, resolution_options=options)
    did = generated.did_document["id"]

    assert did.startswith(key_type.prefix)
    assert [key.id for key in generated.keys] == [
        vm["id"] for vm in generated.did_document["verificationMethod"]
    ]

    resolved = await did_key.resolve(did, options)
    assert resolved.did_document == generated.did_document
    assert resolved.did_resolution_metadata == {"contentType": accept}


@pytest.mark.asyncio
async def test_bls12381_alias():
    generated = await did_key.generate("bls12381")
    (key,) = generated.keys
    assert key.public_key_jwk["crv"] == "BLS12381_G2"


@pytest.mark.asyncio
async def test_generate2_facade():
    generated = await did_key.generate2("secp256r1", kid="key-0")
    (key,) = generated.keys

    assert generated.did_document["id"].startswith("did:jwk:")
    assert key.id == key.controller == generated.did_document["id"]


@pytest.mark.asyncio
async def test_generate_unsupported():
    with pytest.raises(UnsupportedType):
        await did_key.generate("rsa")
    with pytest.raises(UnsupportedType):
        await did_key.generate("bls12381-g1g2")


@pytest.mark.asyncio
async def test_resolve_unsupported():
    with pytest.raises(UnsupportedPrefix):
        await did_key.resolve("did:web:example.com")


@pytest.mark.asyncio
async def test_instance_registry(recording_registry, recording_handler):
    instance = did_key.DIDKey(recording_registry)
    await instance.resolve("did:key:z6MktwupdmLXVVqTzCw4i46r4uGyosGXRnR3XjN4Zq7oMMsw")
    assert recording_handler.resolve_calls[0][0].startswith("did:key:z6Mk")


@pytest.mark.parametrize("tag", ["bls12381-g2", "bls12381"])
@pytest.mark.parametrize("accept", ["application/did+json", DID_LD_JSON])
@pytest.mark.asyncio
async def test_bls12381_g2_generate_resolve(bls12381_g2_options, tag, accept):
    options = ResolutionOptions(accept)
    generated = await did_key.generate(tag, bls12381_g2_options, options)
    did = generated.did_document["id"]
    (key,) = generated.keys

    assert did.startswith(KeyType.BLS12381_G2.prefix)
    assert key.type == (
        "Bls12381G2Key2020" if accept == DID_LD_JSON else "JsonWebKey2020"
    )

    resolved = await did_key.resolve(did, options)
    assert resolved.did_document == generated.did_document
