"""Gift delivery with receiver validation."""

from __future__ import annotations

from core.errors import InvalidArgumentError, WrongReceiverError
from core.logging_config import get_logger
from gifts.gift_types import Gift, Person

_LOGGER = get_logger(__name__)


class DeliveryService:
    """Hands gifts to their intended receivers."""

    def send(self, receiver: Person | None, gift: Gift | None) -> None:
        """Deliver ``gift`` to ``receiver``.

        Args:
            receiver: Person expected to receive the gift.
            gift: Gift to deliver.

        Raises:
            InvalidArgumentError: If either argument is None.
            WrongReceiverError: If the gift is addressed to someone else.
        """
        if receiver is None or gift is None:
            raise InvalidArgumentError("Arguments cannot be None")
        if receiver != gift.receiver:
            raise WrongReceiverError(f"Wrong receiver for gift '{gift.name}': got {receiver.name}")
        receiver.receive_gift(gift)
        _LOGGER.info("gift_delivered", receiver=receiver.name, gift=gift.name)
