"""Account services."""

from .identity_resolver import IdentityResolver, get_resolver, normalize_key

__all__ = ["IdentityResolver", "get_resolver", "normalize_key"]
