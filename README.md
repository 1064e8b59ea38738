# iqpacket

iqpacket frames, checks and extracts packets for a simple serial byte
protocol. Each packet looks like this:

```
0x55 | length | type | data (length bytes) | crc low | crc high
```

The CRC is a 16-bit CRC-CCITT (polynomial 0x1021). It starts at `0xFFFF`
and covers the length byte, the type byte and the data.

The package is pure Python and has no dependencies.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `iqpacket.crc`: `make_crc(data)`, `byte_update_crc(crc, byte)` and
  `array_update_crc(crc, data)`.
- `iqpacket.byte_queue`: `ByteQueue(size)`, a bounded FIFO of byte values.
  It holds at most `size - 1` items. `put` raises `QueueFullError` when the
  queue is full and `ValueError` for values outside 0-255. `get` and `peek`
  raise `IndexError` on an empty queue.
- `iqpacket.packet_finder`:
  - `PacketFinder(buffer_size, index_queue_size)` takes a raw byte stream
    and picks out valid packets, resynchronising after corrupt input.
    `buffer_size` must be between 2 and 256.
  - `form_packet(msg_type, data)` builds one complete frame.
  - `BufferOverflowError` means incoming data did not fit.
- `iqpacket.generic_interface`: `GenericInterface`. It joins a
  `PacketFinder` for received bytes with a transmit buffer for outgoing
  packets. It is meant to be wired to whatever transport you have.

## Building a packet

```python
from iqpacket.packet_finder import form_packet

frame = form_packet(msg_type=2, data=b"\x00\x01")
# frame starts with 0x55, then length 2, type 2, the data and a two-byte CRC
```

`form_packet` accepts up to 255 data bytes. The parser only accepts packets
whose length byte is at most 64 (`MAX_PACKET_DATA_SIZE`).

## Finding packets in a byte stream

```python
from iqpacket.packet_finder import PacketFinder, form_packet

finder = PacketFinder(buffer_size=256, index_queue_size=64)
finder.put_bytes(b"\x00garbage" + form_packet(5, b"hi"))

for packet in finder.packets():
    msg_type, payload = packet[0], packet[1:]
    print(msg_type, payload)
```

`peek_packet()` returns the type byte followed by the payload, or `None` if
no packet is waiting. `drop_packet()` discards that packet and returns
`False` if there was none. `get_packet_copy()` does both in one call, and
`packets()` yields and removes every packet found so far.

`put_bytes` raises `BufferOverflowError` when the ring buffer cannot hold
all of the new bytes. The bytes that did fit are still parsed. A packet that
is found while the index queue is full is lost.

## Talking over a serial link

```python
from iqpacket.generic_interface import GenericInterface

com = GenericInterface(tx_buffer_size=256, rx_buffer_size=256, index_queue_size=64)

com.send_packet(msg_type=74, data=b"\x01\x00")
outgoing = com.get_tx_bytes()      # write these bytes to your port

incoming = b""                     # bytes read back from your port
com.set_rx_bytes(incoming)         # returns False when given no bytes
while (packet := com.peek_packet()) is not None:
    print(packet[0], packet[1:])
    com.drop_packet()
```

The defaults are a 64-byte transmit buffer, a 64-byte receive buffer and an
index queue of 10 slots.

`send_bytes` and `send_packet` are all or nothing: when the transmit buffer
cannot hold the whole write they raise `BufferOverflowError` and buffer none
of it. `get_tx_bytes()` returns every queued byte and empties the buffer; it
returns `b""` when nothing is waiting. `set_rx_bytes` passes on any
`BufferOverflowError` from the receive side.

## What it does not do

iqpacket does not open or drive a serial port; you move the bytes yourself.
It has no objects for the individual settings or readings of a motor
controller: it deals only in message types and raw payload bytes, and
encoding or decoding those payloads is up to you.