"""RTP packet header and RFC 2833 event header encoding."""

from __future__ import annotations

import struct
from dataclasses import dataclass

HEADER_SIZE = 12
EVENT_HEADER_SIZE = 4
VERSION = 2

_HEADER = struct.Struct("!BBHII")
_EVENT = struct.Struct("!BBH")


class RTPError(ValueError):
    """Raised when an RTP packet cannot be decoded."""


@dataclass
class Header:
    """Fixed RTP header found at the start of each media packet."""

    pad: bool = False
    mark: bool = False
    pt: int = 0
    seq: int = 0
    ts: int = 0
    ssrc: int = 0

    def pack(self) -> bytes:
        """Encode the header as 12 bytes in network order."""
        b0 = (VERSION & 0x03) << 6
        if self.pad:
            b0 |= 1 << 5
        b1 = self.pt & 0x7F
        if self.mark:
            b1 |= 1 << 7
        return _HEADER.pack(
            b0, b1, self.seq & 0xFFFF, self.ts & 0xFFFFFFFF, self.ssrc & 0xFFFFFFFF
        )

    @classmethod
    def unpack(cls, data: bytes) -> "Header":
        """Decode a header from the start of ``data``."""
        if len(data) < HEADER_SIZE:
            raise RTPError("truncated rtp packet")
        b0, b1, seq, ts, ssrc = _HEADER.unpack_from(data)
        if b0 >> 6 != VERSION:
            raise RTPError("bad rtp version header")
        if (b0 >> 4) & 1:
            raise RTPError("rtp extended headers not supported")
        return cls(
            pad=bool((b0 >> 5) & 1),
            mark=bool((b1 >> 7) & 1),
            pt=b1 & 0x7F,
            seq=seq,
            ts=ts,
            ssrc=ssrc,
        )


@dataclass
class EventHeader:
    """Telephone event payload (DTMF and the like) following the RTP header."""

    event: int = 0
    end: bool = False
    reserved: bool = False
    volume: int = 0
    duration: int = 0

    def pack(self) -> bytes:
        """Encode the event as 4 bytes in network order."""
        b1 = self.volume & 63
        if self.reserved:
            b1 |= 1 << 6
        if self.end:
            b1 |= 1 << 7
        return _EVENT.pack(self.event & 0xFF, b1, self.duration & 0xFFFF)

    @classmethod
    def unpack(cls, data: bytes) -> "EventHeader":
        """Decode an event from the start of ``data``."""
        if len(data) < EVENT_HEADER_SIZE:
            raise RTPError("truncated rtp packet")
        event, b1, duration = _EVENT.unpack_from(data)
        return cls(
            event=event,
            end=b1 >> 7 == 1,
            reserved=(b1 >> 6) & 1 == 1,
            volume=b1 & 63,
            duration=duration,
        )