"""did:key handler interfaces."""

from .base import BaseKeyPair, DIDKeyHandler, Handler

__all__ = ["BaseKeyPair", "DIDKeyHandler", "Handler"]
