import pytest

from did_key.multiformats import multibase, multicodec

ED25519_PUBLIC = bytes.fromhex(
    "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
)


def test_base58btc_fingerprint():
    wrapped = multicodec.wrap("ed25519-pub", ED25519_PUBLIC)
    assert (
        multibase.encode(wrapped, "base58btc")
        == "z6MktwupdmLXVVqTzCw4i46r4uGyosGXRnR3XjN4Zq7oMMsw"
    )


def test_decode_and_unwrap():
    codec, data = multicodec.unwrap(
        multibase.decode("z6MktwupdmLXVVqTzCw4i46r4uGyosGXRnR3XjN4Zq7oMMsw")
    )
    assert codec.name == "ed25519-pub"
    assert data == ED25519_PUBLIC


def test_base64url_unpadded():
    assert multibase.b64url.encode(b"\xff\xfe") == "__4"
    assert multibase.b64url.decode("__4") == b"\xff\xfe"
    assert multibase.encode(b"\xff\xfe", multibase.Encoding.base64url) == "u__4"


@pytest.mark.parametrize("value", ["", "x123", "z0OIl"])
def test_decode_invalid(value):
    with pytest.raises(ValueError):
        multibase.decode(value)


def test_unknown_codec():
    with pytest.raises(ValueError):
        multicodec.unwrap(b"\x00\x01\x02")
    with pytest.raises(ValueError):
        multicodec.wrap("rsa-pub", b"")


@pytest.mark.parametrize(
    "name, code",
    [
        ("ed25519-pub", b"\xed\x01"),
        ("x25519-pub", b"\xec\x01"),
        ("secp256k1-pub", b"\xe7\x01"),
        ("bls12_381-g1-pub", b"\xea\x01"),
        ("bls12_381-g2-pub", b"\xeb\x01"),
        ("bls12_381-g1g2-pub", b"\xee\x01"),
        ("p256-pub", b"\x80\x24"),
        ("p384-pub", b"\x81\x24"),
        ("p521-pub", b"\x82\x24"),
    ],
)
def test_codes(name, code):
    assert multicodec.SupportedCodecs.by_name(name).code == code
