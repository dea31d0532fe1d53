"""Typed models for gift delivery."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Person:
    """A gift sender or receiver.

    Attributes:
        person_id: Stable identifier used for equality.
        name: Display name.
        received_gifts: Gifts handed to this person so far; excluded from
            equality and hashing.
    """

    person_id: int
    name: str
    received_gifts: list["Gift"] = field(default_factory=list, compare=False, repr=False)

    def receive_gift(self, gift: "Gift") -> None:
        """Record a delivered gift."""
        self.received_gifts.append(gift)


@dataclass(frozen=True)
class Gift:
    """A gift addressed from one person to another.

    Attributes:
        name: What the gift is.
        price: Gift price.
        sender: Person sending the gift.
        receiver: Intended receiver.
    """

    name: str
    price: float
    sender: Person
    receiver: Person
