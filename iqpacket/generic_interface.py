"""Hardware-free communication endpoint: bytes in, packets out, and back."""

from __future__ import annotations

from .packet_finder import BufferOverflowError, PacketFinder, form_packet


class GenericInterface:
    """Buffers outgoing packets and parses incoming bytes into packets.

    The caller moves bytes to and from the real transport with
    ``get_tx_bytes`` and ``set_rx_bytes``.
    """

    def __init__(
        self,
        tx_buffer_size: int = 64,
        rx_buffer_size: int = 64,
        index_queue_size: int = 10,
    ) -> None:
        if tx_buffer_size < 1:
            raise ValueError("transmit buffer size must be positive")
        self._tx_size = tx_buffer_size
        self._tx = bytearray()
        self._finder = PacketFinder(rx_buffer_size, index_queue_size)

    def set_rx_bytes(self, data: bytes) -> bool:
        """Hand received bytes to the parser; return False if there were none."""
        if not data:
            return False
        self._finder.put_bytes(data)
        return True

    def peek_packet(self) -> bytes | None:
        """Return the oldest received packet (type byte and data), or None."""
        return self._finder.peek_packet()

    def drop_packet(self) -> bool:
        """Discard the oldest received packet; return False if there was none."""
        return self._finder.drop_packet()

    def send_packet(self, msg_type: int, data: bytes) -> None:
        """Frame ``data`` as a packet and queue it for transmission."""
        self.send_bytes(form_packet(msg_type, data))

    def send_bytes(self, data: bytes) -> None:
        """Queue raw bytes for transmission, all or nothing."""
        if len(self._tx) + len(data) > self._tx_size:
            raise BufferOverflowError("transmit buffer has no room for the bytes")
        self._tx.extend(data)

    def get_tx_bytes(self) -> bytes:
        """Take every queued outgoing byte; empty when nothing is waiting."""
        out = bytes(self._tx)
        self._tx.clear()
        return out