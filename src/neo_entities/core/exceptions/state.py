"""State exceptions for the audit envelope."""

from .base import NeoEntitiesError


class InvalidStateError(NeoEntitiesError):
    """Raised when an object would be built in a state it may never hold.

    The envelope raises it when the last-change trail is only partially
    populated.
    """
    pass
