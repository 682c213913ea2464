from anyio import fail_after
import pytest

from src.platform.event.memory_stream_channel import MemoryStreamChannel


class TestMemoryStreamChannel:
    @pytest.mark.asyncio
    async def test_send_then_receive(self):
        channel = MemoryStreamChannel()

        assert channel.send(b'first') is True
        assert channel.send(b'second') is True

        with fail_after(1.0):
            assert await channel.receive_stream.receive() == b'first'
            assert await channel.receive_stream.receive() == b'second'

    def test_full_buffer_reports_failed_send(self):
        channel = MemoryStreamChannel(max_buffer_size=2)

        assert channel.send(b'1') is True
        assert channel.send(b'2') is True
        assert channel.send(b'3') is False

    def test_send_after_reader_closed_fails(self):
        channel = MemoryStreamChannel()
        channel.close_reader()

        assert channel.is_active is False
        assert channel.send(b'late') is False

    def test_send_after_close_fails(self):
        channel = MemoryStreamChannel()
        channel.close()

        assert channel.send(b'late') is False

    @pytest.mark.asyncio
    async def test_close_drains_buffer_then_ends_iteration(self):
        channel = MemoryStreamChannel()
        channel.send(b'buffered')
        channel.close()

        with fail_after(1.0):
            received = [payload async for payload in channel.receive_stream]

        assert received == [b'buffered']
