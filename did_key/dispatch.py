"""Route generate and resolve calls to key type handlers."""

import logging
from typing import Optional, Union

from did_key.errors import UnsupportedType
from did_key.models import (
    DidGeneration,
    DidResolution,
    GenerateOptions,
    ResolutionOptions,
)
from did_key.registry import PREFIX_LENGTH, KeyType, Registry, default_registry

LOG = logging.getLogger(__name__)

# The NIST curve handler cannot derive keys from a seed
SEEDLESS_OPTIONS = {
    KeyType.SECP256R1: GenerateOptions(kty="EC", crv_or_size="P-256"),
    KeyType.SECP384R1: GenerateOptions(kty="EC", crv_or_size="P-384"),
    KeyType.SECP521R1: GenerateOptions(kty="EC", crv_or_size="P-521"),
}


def options_for_type(key_type: Union[str, KeyType]) -> GenerateOptions:
    """Return the fixed generate options of a seed-incapable key type."""
    resolved = (
        key_type if isinstance(key_type, KeyType) else KeyType.from_tag(key_type)
    )
    options = SEEDLESS_OPTIONS.get(resolved) if resolved else None
    if not options:
        raise UnsupportedType(f"No options for type: {key_type}")
    return options


class Dispatcher:
    """Dispatch did:key operations through a registry."""

    def __init__(self, registry: Optional[Registry] = None):
        """Initialize the dispatcher."""
        self.registry = registry or default_registry()

    async def generate(
        self,
        type: Union[str, KeyType],
        generate_options: Optional[GenerateOptions] = None,
        resolution_options: Optional[ResolutionOptions] = None,
    ) -> DidGeneration:
        """Generate a DID of the given key type."""
        handler = self.registry.handler_for_type(type)
        key_type = type if isinstance(type, KeyType) else KeyType.from_tag(type)

        options = generate_options or GenerateOptions()
        if not key_type.supports_seed:
            LOG.debug("Replacing generate options for seed-incapable type %s", type)
            options = options_for_type(key_type)

        LOG.debug("Generating %s did:key with %s", type, handler.__class__.__name__)
        return await handler.generate(
            options, resolution_options or ResolutionOptions()
        )

    async def resolve(
        self, did: str, resolution_options: Optional[ResolutionOptions] = None
    ) -> DidResolution:
        """Resolve a DID by its prefix."""
        handler = self.registry.handler_for_prefix(did[:PREFIX_LENGTH])
        LOG.debug("Resolving %s with %s", did, handler.__class__.__name__)
        return await handler.resolve(did, resolution_options or ResolutionOptions())
