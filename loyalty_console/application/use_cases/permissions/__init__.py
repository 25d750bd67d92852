"""Use cases for working with principal capabilities."""

from .codec import decode_capabilities, encode_capabilities, known_keys

__all__ = ["decode_capabilities", "encode_capabilities", "known_keys"]
