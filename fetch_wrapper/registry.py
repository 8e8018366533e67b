"""Process-wide slot for singleton-flagged instances."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class InstanceRegistry:
    """
    Holds at most one instance per capability token.

    The first instance registered under a token stays authoritative until
    ``reset`` is called; later registrations for that token are ignored.
    """

    def __init__(self) -> None:
        self._instances: dict[Any, Any] = {}

    def get(self, token: Any) -> Any | None:
        return self._instances.get(token)

    def register(self, token: Any, instance: Any) -> Any:
        """Record ``instance`` unless the token is taken; return the winner."""
        existing = self._instances.setdefault(token, instance)
        if existing is not instance:
            logger.debug("Singleton already registered", extra={"token": repr(token)})
        return existing

    def reset(self, token: Any | None = None) -> None:
        """Forget one token, or every token when none is given."""
        if token is None:
            self._instances.clear()
        else:
            self._instances.pop(token, None)

    def __contains__(self, token: Any) -> bool:
        return token in self._instances


default_registry = InstanceRegistry()
