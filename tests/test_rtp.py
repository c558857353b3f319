import pytest

from voipkit.rtp import HEADER_SIZE, EventHeader, Header, RTPError


def test_rtp_round_trip():
    h = Header(pad=False, mark=True, pt=42, seq=1234, ts=567891234, ssrc=6789)
    data = h.pack()
    assert len(data) == HEADER_SIZE
    assert Header.unpack(data) == h


def test_round_trip_with_padding():
    h = Header(pad=True, mark=False, pt=0, seq=65535, ts=0xFFFFFFFF, ssrc=1)
    assert Header.unpack(h.pack()) == h


def test_header_wire_bytes():
    h = Header(mark=True, pt=0, seq=666, ts=160, ssrc=0x01020304)
    assert h.pack() == bytes(
        [0x80, 0x80, 0x02, 0x9A, 0x00, 0x00, 0x00, 0xA0, 0x01, 0x02, 0x03, 0x04]
    )


def test_unpack_ignores_trailing_payload():
    h = Header(pt=101, seq=7, ts=8, ssrc=9)
    assert Header.unpack(h.pack() + b"\x00" * 160) == h


def test_unpack_truncated():
    with pytest.raises(RTPError, match="truncated"):
        Header.unpack(b"\x80" * 11)


def test_unpack_bad_version():
    data = bytearray(Header().pack())
    data[0] = 0x40
    with pytest.raises(RTPError, match="version"):
        Header.unpack(bytes(data))


def test_unpack_extension_not_supported():
    data = bytearray(Header().pack())
    data[0] |= 0x10
    with pytest.raises(RTPError, match="extended"):
        Header.unpack(bytes(data))


def test_event_round_trip():
    ev = EventHeader(event=11, end=True, reserved=False, volume=6, duration=400)
    data = ev.pack()
    assert len(data) == 4
    assert EventHeader.unpack(data) == ev


def test_event_wire_bytes():
    ev = EventHeader(event=5, end=True, volume=6, duration=400)
    assert ev.pack() == bytes([5, 0x86, 0x01, 0x90])


def test_event_reserved_bit():
    ev = EventHeader(event=1, reserved=True, volume=63, duration=1)
    assert ev.pack()[1] == 0x7F
    assert EventHeader.unpack(ev.pack()) == ev


def test_event_unpack_truncated():
    with pytest.raises(RTPError):
        EventHeader.unpack(b"\x00\x00\x00")