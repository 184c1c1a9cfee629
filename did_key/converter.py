"""Convert key pairs between DID document representations."""

import asyncio
import logging
from typing import Callable, Optional, Sequence, Type

from did_key.classifier import classify
from did_key.dispatch import Dispatcher
from did_key.errors import (
    MissingKeyMaterial,
    MixedControllers,
    VerificationMethodNotFound,
)
from did_key.handlers.base import BaseKeyPair
from did_key.models import (
    DID_JSON,
    JSON_OBJ,
    DidGeneration,
    KeyPair,
    ResolutionOptions,
)

LOG = logging.getLogger(__name__)

Classifier = Callable[[JSON_OBJ], Type[BaseKeyPair]]


def _find_verification_method(document: JSON_OBJ, id: str) -> JSON_OBJ:
    for vm in document.get("verificationMethod", []):
        if vm.get("id") == id:
            return vm
    raise VerificationMethodNotFound(
        f"Verification method {id} not found in {document.get('id')}"
    )


async def convert(
    dispatcher: Dispatcher,
    keys: Sequence[KeyPair],
    resolution_options: Optional[ResolutionOptions] = None,
    classifier: Classifier = classify,
) -> DidGeneration:
    """Re-export key pairs in the representation of resolution_options.

    The controller is resolved as application/did+json to classify each key
    and in the requested representation to pick the target type.
    """
    if not keys:
        raise MissingKeyMaterial("No keys to convert")

    controller = keys[0].controller
    if any(key.controller != controller for key in keys):
        raise MixedControllers("All keys must share one controller")

    resolution_options = resolution_options or ResolutionOptions()
    old, new = await asyncio.gather(
        dispatcher.resolve(controller, ResolutionOptions(accept=DID_JSON)),
        dispatcher.resolve(controller, resolution_options),
    )

    async def _convert(key: KeyPair) -> KeyPair:
        vm = _find_verification_method(new.did_document, key.id)
        vm_as_json = _find_verification_method(old.did_document, key.id)
        key_pair_cls = classifier(vm_as_json)
        LOG.debug("Converting %s to %s with %s", key.id, vm["type"], key_pair_cls)
        handle = await key_pair_cls.from_key_pair(key)
        return await handle.export(type=vm["type"], private_key=True)

    converted = await asyncio.gather(*(_convert(key) for key in keys))
    return DidGeneration(did_document=new.did_document, keys=list(converted))
