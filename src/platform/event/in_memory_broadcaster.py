"""
In-memory Broadcaster Implementation

Keyed fan-out used by the SSE endpoints of a single process.
"""

from collections.abc import Hashable
from typing import Dict, List

from src.platform.event.i_subscriber_channel import ISubscriberChannel
from src.platform.logging.loguru_io import Logger


class InMemoryBroadcasterImpl:
    """
    In-memory pub/sub for serialized snapshots

    Architecture:
    - Use Case → broadcast() → channel.send() → SSE Endpoint
    - Each key has a list of channels, kept in registration order
    - Nothing here awaits: a broadcast runs to completion inside the
      caller's critical section, so every channel has the update (or has
      been dropped) when the caller's mutation returns

    Memory Management:
    - Failed channels are closed and removed during broadcast
    - Empty key groups are removed on unsubscribe
    """

    def __init__(self) -> None:
        self._subscribers: Dict[Hashable, List[ISubscriberChannel]] = {}

    def subscribe(self, *, key: Hashable, channel: ISubscriberChannel) -> None:
        channels = self._subscribers.setdefault(key, [])
        if any(existing is channel for existing in channels):
            return
        channels.append(channel)

        Logger.base.debug(
            f'📡 [BROADCASTER] Subscribed to {key} (total subscribers: {len(channels)})'
        )

    def unsubscribe(self, *, key: Hashable, channel: ISubscriberChannel) -> None:
        channels = self._subscribers.get(key)
        if channels is None:
            return

        for i, existing in enumerate(channels):
            if existing is channel:
                channels.pop(i)
                Logger.base.debug(
                    f'📡 [BROADCASTER] Unsubscribed from {key} (remaining: {len(channels)})'
                )
                break

        if not channels:
            del self._subscribers[key]
            Logger.base.debug(f'📡 [BROADCASTER] Cleaned up empty list for {key}')

    def broadcast(self, *, key: Hashable, payload: bytes) -> int:
        channels = self._subscribers.get(key)
        if not channels:
            Logger.base.debug(f'📡 [BROADCASTER] No subscribers for {key}')
            return 0

        delivered = 0
        failed: List[ISubscriberChannel] = []

        # Iterate over a copy; failed channels are removed afterwards
        for channel in list(channels):
            if channel.send(payload):
                delivered += 1
            else:
                failed.append(channel)

        for channel in failed:
            channel.close()
            self.unsubscribe(key=key, channel=channel)

        if failed:
            Logger.base.warning(
                f'⚠️ [BROADCASTER] Dropped {len(failed)} closed channel(s) for {key}'
            )
        Logger.base.info(
            f'📡 [BROADCASTER] Broadcast to {key}: delivered={delivered}, dropped={len(failed)}'
        )
        return delivered

    def subscriber_count(self, *, key: Hashable) -> int:
        return len(self._subscribers.get(key, []))

    def total_subscriber_count(self) -> int:
        return sum(len(channels) for channels in self._subscribers.values())

    def close_all(self) -> None:
        for channels in self._subscribers.values():
            for channel in channels:
                channel.close()
        closed = self.total_subscriber_count()
        self._subscribers.clear()
        Logger.base.info(f'📡 [BROADCASTER] Closed {closed} channel(s)')
