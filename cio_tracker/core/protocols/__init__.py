"""Core protocols.

Adapters in ``cio_tracker.adapters`` implement these.
"""

from cio_tracker.core.protocols.identity import IdentityProvider

__all__ = ["IdentityProvider"]
