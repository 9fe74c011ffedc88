"""Dispatch of named cipher operations to registered engines."""

from filemorph.services.dispatch.dispatcher import CipherDispatcher, TransformResult

__all__ = ["CipherDispatcher", "TransformResult"]
