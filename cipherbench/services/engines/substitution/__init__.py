"""Substitution cipher engines."""

from cipherbench.services.engines.substitution.mod_alpha import ModAlphaEngine

__all__ = [
    "ModAlphaEngine",
]
