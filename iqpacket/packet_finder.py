"""Framing and incremental parsing of checksummed serial packets.

A packet on the wire is ``0x55, length, type, data[length], crc_low, crc_high``
where the CRC covers the length, type and data bytes.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator

from .byte_queue import ByteQueue, QueueFullError
from .crc import byte_update_crc, make_crc

START_BYTE = 0x55
MAX_PACKET_DATA_SIZE = 64
MAX_PACKET_SIZE = MAX_PACKET_DATA_SIZE + 5


class BufferOverflowError(Exception):
    """Raised when incoming bytes do not fit into a buffer and some are lost."""


class _State(enum.Enum):
    START = enum.auto()
    LENGTH = enum.auto()
    TYPE = enum.auto()
    DATA = enum.auto()
    CRC_LOW = enum.auto()
    CRC_HIGH = enum.auto()


def form_packet(msg_type: int, data: bytes) -> bytes:
    """Frame ``data`` of message type ``msg_type`` as a complete packet."""
    if not 0 <= msg_type <= 0xFF:
        raise ValueError(f"message type out of range: {msg_type}")
    if len(data) > 0xFF:
        raise ValueError("packet data longer than 255 bytes")
    body = bytes([len(data), msg_type]) + bytes(data)
    crc = make_crc(body)
    return bytes([START_BYTE]) + body + bytes([crc & 0xFF, crc >> 8])


class PacketFinder:
    """Collects raw bytes in a ring buffer and finds valid packets in them."""

    def __init__(self, buffer_size: int, index_queue_size: int) -> None:
        if not 2 <= buffer_size <= 256:
            raise ValueError("buffer size must be between 2 and 256")
        self._size = buffer_size
        self._buffer = bytearray(buffer_size)
        self._indices = ByteQueue(index_queue_size)
        self._state = _State.START
        self._parse_index = 0
        self._packet_start = 0
        self._received_length = 0
        self._data_bytes = 0
        self._expected_crc = 0
        self._received_crc = 0
        self._start_data = 0
        self._end_data = 0

    def _advance(self) -> None:
        self._parse_index = (self._parse_index + 1) % self._size

    def _flush_unused(self) -> None:
        if self._indices.is_empty():
            self._start_data = self._packet_start
        else:
            self._start_data = self._indices.peek()

    def _write(self, position: int, chunk: bytes) -> None:
        self._buffer[position:position + len(chunk)] = chunk

    def _store(self, data: bytes) -> bool:
        """Copy as much of ``data`` as fits; return True when all of it did."""
        start, end, size = self._start_data, self._end_data, self._size
        if end < start:
            count = min(start - end - 1, len(data))
            self._write(end, data[:count])
            self._end_data = end + count
            return count == len(data)

        current_end = size - 1 if start == 0 else size
        start_space = 0 if start == 0 else start - 1
        first = min(current_end - end, len(data))
        second = min(start_space, len(data) - first)
        self._write(end, data[:first])
        if second == 0:
            end += first
            self._end_data = 0 if end > size - 1 else end
        else:
            self._write(0, data[first:first + second])
            self._end_data = second
        return first + second == len(data)

    def _parse(self) -> None:
        buf = self._buffer
        while self._parse_index != self._end_data:
            byte = buf[self._parse_index]
            state = self._state
            if state is _State.START:
                if byte == START_BYTE:
                    self._state = _State.LENGTH
                self._advance()
                self._packet_start = self._parse_index
            elif state is _State.LENGTH:
                self._packet_start = self._parse_index
                if byte <= MAX_PACKET_DATA_SIZE:
                    self._received_length = byte
                    self._expected_crc = make_crc((byte,))
                    self._state = _State.TYPE
                    self._advance()
                else:
                    self._state = _State.START
            elif state is _State.TYPE:
                self._expected_crc = byte_update_crc(self._expected_crc, byte)
                self._state = _State.DATA if self._received_length > 0 else _State.CRC_LOW
                self._data_bytes = 0
                self._advance()
            elif state is _State.DATA:
                self._expected_crc = byte_update_crc(self._expected_crc, byte)
                self._data_bytes += 1
                if self._data_bytes >= self._received_length:
                    self._state = _State.CRC_LOW
                self._advance()
            elif state is _State.CRC_LOW:
                self._received_crc = byte
                self._state = _State.CRC_HIGH
                self._advance()
            else:
                self._received_crc += 256 * byte
                if self._expected_crc == self._received_crc:
                    try:
                        self._indices.put(self._packet_start)
                    except QueueFullError:
                        pass  # no room to record it; the packet is lost
                    self._advance()
                else:
                    self._parse_index = self._packet_start
                self._state = _State.START

    def put_bytes(self, data: bytes) -> None:
        """Add received bytes and parse them.

        Raises BufferOverflowError if some bytes did not fit; those that did
        are still parsed.
        """
        self._flush_unused()
        complete = self._store(bytes(data))
        self._parse()
        if not complete:
            raise BufferOverflowError("receive buffer full, bytes were dropped")

    def peek_packet(self) -> bytes | None:
        """Return the oldest found packet's type byte and data, or None."""
        if self._indices.is_empty():
            return None
        start = self._indices.peek()
        length = self._buffer[start] + 1
        first = (start + 1) % self._size
        return bytes(self._buffer[(first + i) % self._size] for i in range(length))

    def drop_packet(self) -> bool:
        """Discard the oldest found packet; return False if there was none."""
        if self._indices.is_empty():
            return False
        start = self._indices.get()
        length = self._buffer[start] + 1
        if not self._indices.is_empty():
            self._start_data = self._indices.peek()
        else:
            self._start_data = (start + 1 + length) % self._size
        return True

    def get_packet_copy(self) -> bytes | None:
        """Remove and return the oldest found packet, or None if there is none."""
        packet = self.peek_packet()
        if packet is not None:
            self.drop_packet()
        return packet

    def packets(self) -> Iterator[bytes]:
        """Yield and remove every packet found so far, oldest first."""
        while (packet := self.get_packet_copy()) is not None:
            yield packet