"""Packet framing, CRC checking and stream parsing for a serial byte protocol."""

__version__ = "0.1.0"
__all__ = ["byte_queue", "crc", "generic_interface", "packet_finder"]