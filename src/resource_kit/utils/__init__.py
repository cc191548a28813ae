"""Pure helpers shared by the transports."""

from . import types
from . import urls

__all__ = ["types", "urls"]
