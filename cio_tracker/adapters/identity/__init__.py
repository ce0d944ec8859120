"""Identity provider adapters."""

from cio_tracker.adapters.identity.context import ContextVarIdentityProvider
from cio_tracker.adapters.identity.fake import FakeIdentityProvider
from cio_tracker.adapters.identity.static import StaticIdentityProvider

__all__ = ["ContextVarIdentityProvider", "FakeIdentityProvider", "StaticIdentityProvider"]
