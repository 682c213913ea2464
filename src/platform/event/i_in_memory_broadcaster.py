"""
In-memory Broadcaster Interface

Keyed fan-out of serialized payloads to live subscriber channels
within the same process.
"""

from collections.abc import Hashable
from typing import Protocol

from src.platform.event.i_subscriber_channel import ISubscriberChannel


class IInMemoryBroadcaster(Protocol):
    """
    Interface for in-memory keyed broadcasting

    Used to push fresh snapshots from use cases to every SSE connection
    registered under the same key (e.g. a table id).
    """

    def subscribe(self, *, key: Hashable, channel: ISubscriberChannel) -> None:
        """
        Register a channel under a key

        Args:
            key: Subscription key
            channel: Channel that will receive every later broadcast for this key
        """
        ...

    def unsubscribe(self, *, key: Hashable, channel: ISubscriberChannel) -> None:
        """
        Remove a channel

        Note:
            - No-op if the channel (or the key) is not registered
            - Empty key groups are discarded
        """
        ...

    def broadcast(self, *, key: Hashable, payload: bytes) -> int:
        """
        Push a payload to every channel registered under the key

        Returns:
            Number of channels that accepted the payload

        Note:
            - Delivery follows registration order
            - A channel whose send fails is closed and removed; remaining
              channels still receive the payload
            - Nothing is buffered for channels that subscribe later
        """
        ...

    def subscriber_count(self, *, key: Hashable) -> int: ...

    def total_subscriber_count(self) -> int: ...

    def close_all(self) -> None: ...
