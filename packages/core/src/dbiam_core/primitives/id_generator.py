import uuid
from typing import Protocol


class IIDGenerator(Protocol):
    """
    Protocol for ID generation strategies.
    Repositories call it when an unsaved aggregate is persisted for the
    first time.
    """

    def next_id(self) -> str:
        """Generates the next unique identifier."""
        ...


class UUID4Generator(IIDGenerator):
    """Default ID generator using UUIDv4 strings."""

    def next_id(self) -> str:
        return str(uuid.uuid4())
