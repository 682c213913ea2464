"""
Subscriber Channel Interface

A live, one-way push connection to a single client.
"""

from typing import Protocol


class ISubscriberChannel(Protocol):
    """
    Push side of a live connection

    The broadcaster only ever needs two capabilities: push a payload and
    close the conduit. Anything that can do both (an SSE stream, a websocket,
    a test double) can be registered as a subscriber.
    """

    def send(self, payload: bytes) -> bool:
        """
        Push one payload without waiting

        Returns:
            True if the payload was accepted, False if the channel is gone or
            cannot take more data. A False result means the channel is closed
            from the broadcaster's point of view.
        """
        ...

    def close(self) -> None:
        """Close the channel; safe to call more than once"""
        ...
