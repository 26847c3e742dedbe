"""
Data model for digital cards.
"""

import uuid
from enum import Enum
from typing import Any, Optional


class CardKind(Enum):
    """Kinds of digital card the wallet can hold."""
    BANK = "Bank Card"
    LOYALTY = "Loyalty Card"
    OTHER = "Other"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: Any) -> "CardKind":
        """
        Resolve a kind from a member, its label or its name.

        Raises:
            ValueError: if the value does not name a kind.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for kind in cls:
                if value == kind.value or value.lower() == kind.name.lower():
                    return kind
        raise ValueError(f"Unknown card kind: {value!r}")


class Card:
    """A digital card record. The id is fixed at creation."""

    def __init__(self, kind: CardKind, title: str, details: str = "", card_id: Optional[str] = None) -> None:
        self._id = card_id or str(uuid.uuid4())
        self.kind = kind
        self.title = title
        self.details = details

    @property
    def id(self) -> str:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return (self.id, self.kind, self.title, self.details) == (other.id, other.kind, other.title, other.details)

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Card(id={self.id!r}, kind={self.kind.name}, title={self.title!r})"
