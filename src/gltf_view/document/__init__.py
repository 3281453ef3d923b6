"""Document exports."""

from .document import Document
from .entity_iteration import EntityIter

__all__ = ["Document", "EntityIter"]
