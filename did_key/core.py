"""did:key generation, resolution and conversion."""

from typing import Optional, Sequence, Union

from did_key import converter, jwk
from did_key.dispatch import Dispatcher
from did_key.models import (
    DidGeneration,
    DidResolution,
    GenerateOptions,
    KeyPair,
    ResolutionOptions,
)
from did_key.registry import KeyType, Registry


class DIDKey:
    """did:key operations over a key type registry."""

    def __init__(self, registry: Optional[Registry] = None):
        """Initialize the DIDKey instance."""
        self.dispatcher = Dispatcher(registry)

    async def generate(
        self,
        type: Union[str, KeyType],
        generate_options: Optional[GenerateOptions] = None,
        resolution_options: Optional[ResolutionOptions] = None,
    ) -> DidGeneration:
        """Generate a did:key of the given type."""
        return await self.dispatcher.generate(
            type, generate_options, resolution_options
        )

    async def generate2(
        self,
        type: Union[str, KeyType],
        seed: Optional[str] = None,
        kid: Optional[str] = None,
        resolution_options: Optional[ResolutionOptions] = None,
    ) -> DidGeneration:
        """Generate a did:jwk from a key of the given type."""
        return await jwk.generate2(
            self.dispatcher, type, seed, kid, resolution_options
        )

    async def resolve(
        self, did: str, resolution_options: Optional[ResolutionOptions] = None
    ) -> DidResolution:
        """Resolve a did:key."""
        return await self.dispatcher.resolve(did, resolution_options)

    async def convert(
        self,
        keys: Sequence[KeyPair],
        resolution_options: Optional[ResolutionOptions] = None,
    ) -> DidGeneration:
        """Convert key pairs to the requested representation."""
        return await converter.convert(self.dispatcher, keys, resolution_options)


_default: Optional[DIDKey] = None


def _did_key() -> DIDKey:
    global _default
    if _default is None:
        _default = DIDKey()
    return _default


async def generate(
    type: Union[str, KeyType],
    generate_options: Optional[GenerateOptions] = None,
    resolution_options: Optional[ResolutionOptions] = None,
) -> DidGeneration:
    """Generate a did:key of the given type."""
    return await _did_key().generate(type, generate_options, resolution_options)


async def generate2(
    type: Union[str, KeyType],
    seed: Optional[str] = None,
    kid: Optional[str] = None,
    resolution_options: Optional[ResolutionOptions] = None,
) -> DidGeneration:
    """Generate a did:jwk from a key of the given type.

    An explicit kid overrides a kid inside the generated JWK.
    """
    return await _did_key().generate2(type, seed, kid, resolution_options)


async def resolve(
    did: str, resolution_options: Optional[ResolutionOptions] = None
) -> DidResolution:
    """Resolve a did:key."""
    return await _did_key().resolve(did, resolution_options)


async def convert(
    keys: Sequence[KeyPair], resolution_options: Optional[ResolutionOptions] = None
) -> DidGeneration:
    """Convert key pairs to the requested representation."""
    return await _did_key().convert(keys, resolution_options)
