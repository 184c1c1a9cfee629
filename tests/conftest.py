from typing import List, Optional, Tuple

import pytest

from did_key.core import DIDKey
from did_key.dispatch import Dispatcher
from did_key.handlers.askar import Bls12381G2KeyPair
from did_key.handlers.base import Handler
from did_key.models import (
    DidGeneration,
    DidResolution,
    GenerateOptions,
    KeyPair,
    ResolutionOptions,
)
from did_key.registry import KeyType, Registry


class RecordingHandler(Handler):
    """Handler returning canned results and recording its calls."""

    def __init__(self, keys: Optional[List[KeyPair]] = None):
        self.keys = keys or []
        self.generate_calls: List[Tuple[GenerateOptions, ResolutionOptions]] = []
        self.resolve_calls: List[Tuple[str, ResolutionOptions]] = []

    async def generate(self, options, resolution_options) -> DidGeneration:
        self.generate_calls.append((options, resolution_options))
        return DidGeneration(
            did_document={"id": "did:example:123", "verificationMethod": []},
            keys=list(self.keys),
        )

    async def resolve(self, did, resolution_options) -> DidResolution:
        self.resolve_calls.append((did, resolution_options))
        return DidResolution(did_document={"id": did, "verificationMethod": []})


@pytest.fixture
def recording_handler():
    yield RecordingHandler()


@pytest.fixture
def recording_registry(recording_handler: RecordingHandler):
    yield Registry({key_type: recording_handler for key_type in KeyType})


@pytest.fixture
def did_key():
    yield DIDKey()


@pytest.fixture
def ed25519_dispatcher():
    """Build a dispatcher whose ed25519 handler returns the given keys."""

    def _ed25519_dispatcher(*keys: KeyPair) -> Tuple[Dispatcher, RecordingHandler]:
        handler = RecordingHandler(list(keys))
        return Dispatcher(Registry({KeyType.ED25519: handler})), handler

    yield _ed25519_dispatcher


@pytest.fixture(scope="session")
def bls12381_g2_options():
    """Seeded options whose bls12381-g2 did:key carries the registered prefix."""
    for i in range(1, 33):
        seed = bytes([i]) * 32
        options = GenerateOptions(secure_random=lambda seed=seed: seed)
        key = Bls12381G2KeyPair.generate(options)
        if key.controller.startswith(KeyType.BLS12381_G2.prefix):
            return options
    raise AssertionError("No seed yields a did:key:zUC7 fingerprint")
