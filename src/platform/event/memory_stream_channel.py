"""
Memory Stream Channel

Subscriber channel backed by an anyio memory object stream. The broadcaster
writes to the send side; the SSE endpoint reads the receive side.
"""

from anyio import BrokenResourceError, ClosedResourceError, WouldBlock, create_memory_object_stream
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream


class MemoryStreamChannel:
    """
    Bounded in-process channel

    - send() never blocks: a full buffer (slow consumer) or a closed reader
      is reported as a failed send
    - close() ends the receive iteration once buffered payloads are drained
    """

    def __init__(self, *, max_buffer_size: int = 10) -> None:
        send_stream, receive_stream = create_memory_object_stream[bytes](
            max_buffer_size=max_buffer_size
        )
        self._send_stream: MemoryObjectSendStream[bytes] = send_stream
        self._receive_stream: MemoryObjectReceiveStream[bytes] = receive_stream
        self.is_active = True

    @property
    def receive_stream(self) -> MemoryObjectReceiveStream[bytes]:
        return self._receive_stream

    def send(self, payload: bytes) -> bool:
        if not self.is_active:
            return False
        try:
            self._send_stream.send_nowait(payload)
            return True
        except (WouldBlock, BrokenResourceError, ClosedResourceError):
            return False

    def close(self) -> None:
        self.is_active = False
        self._send_stream.close()

    def close_reader(self) -> None:
        """Called by the consuming side when the client goes away"""
        self.is_active = False
        self._receive_stream.close()
