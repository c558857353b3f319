"""RTP media session sending and receiving mu-law audio over UDP."""

from __future__ import annotations

import errno
import logging
import random
import socket
import time
from collections.abc import Sequence

from .codecs import DTMF_CODEC, ULAW_CODEC
from .dtmf import char_to_dtmf
from .g711 import linear_to_ulaw, ulaw_to_linear
from .rtp import HEADER_SIZE, EventHeader, Header, RTPError

log = logging.getLogger(__name__)

FRAME_SAMPLES = 160
BIND_MAX_ATTEMPTS = 10
BIND_PORT_MIN = 16384
BIND_PORT_MAX = 32768
DTMF_VOLUME = 6
DTMF_DURATION = 400
DTMF_INTERVAL = 100

_RECV_BUFFER = 2048


def _bind(host: str, port: int) -> socket.socket:
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_DGRAM)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


def listen(host: str = "") -> socket.socket:
    """Open a UDP socket for RTP.

    If ``host`` holds a port (``"host:port"``) it is bound as given;
    otherwise a random even port in [16384, 32768] is chosen, retrying
    when the port is already in use.
    """
    if ":" in host and (host.startswith("[") or host.count(":") == 1):
        name, _, port = host.rpartition(":")
        return _bind(name.strip("[]"), int(port))
    last_error: OSError | None = None
    for _ in range(BIND_MAX_ATTEMPTS):
        port = random.randint(BIND_PORT_MIN, BIND_PORT_MAX)
        if port % 2 == 1:
            port -= 1
        try:
            return _bind(host, port)
        except OSError as exc:
            if exc.errno != errno.EADDRINUSE:
                raise
            last_error = exc
            log.info("RTP listen congestion: %s:%d", host, port)
    assert last_error is not None
    raise last_error


class Session:
    """Sends and receives 160-sample mu-law frames for one media session.

    ``peer`` is the remote ``(host, port)``; while it is None, outgoing
    packets are silently dropped. No RTCP support is provided.
    """

    def __init__(self, host: str = "", peer: tuple[str, int] | None = None) -> None:
        self.sock: socket.socket | None = listen(host)
        self.peer = peer
        self.header = Header(seq=666, ts=0, ssrc=random.getrandbits(32))

    @property
    def local_address(self) -> tuple[str, int]:
        """The address the socket is bound to."""
        if self.sock is None:
            raise RuntimeError("session is closed")
        return self.sock.getsockname()[:2]

    def _ready(self) -> bool:
        return self.sock is not None and self.peer is not None

    def _advance(self, samps: int) -> None:
        self.header.ts = (self.header.ts + samps) & 0xFFFFFFFF
        self.header.seq = (self.header.seq + 1) & 0xFFFF

    def send(self, frame: Sequence[int]) -> None:
        """Encode a frame of linear samples as mu-law and send it."""
        if len(frame) != FRAME_SAMPLES:
            raise ValueError(f"frame must hold {FRAME_SAMPLES} samples, got {len(frame)}")
        if not self._ready():
            return
        self.header.pt = ULAW_CODEC.pt
        packet = self.header.pack() + bytes(linear_to_ulaw(s) for s in frame)
        self._advance(FRAME_SAMPLES)
        self.sock.sendto(packet, self.peer)

    def send_raw(self, pt: int, data: bytes, samps: int) -> None:
        """Send an already encoded payload, advancing the clock by ``samps``."""
        if not self._ready():
            return
        self.header.pt = pt
        packet = self.header.pack() + bytes(data)
        self._advance(samps)
        self.sock.sendto(packet, self.peer)

    def send_dtmf(self, digit: str) -> None:
        """Send a DTMF digit as a train of RFC 2833 telephone events."""
        code = char_to_dtmf(digit)
        if not self._ready():
            return
        self.header.pt = DTMF_CODEC.pt
        self.header.mark = True
        duration = 1
        while True:
            event = EventHeader(event=code, volume=DTMF_VOLUME, duration=duration)
            self.sock.sendto(self.header.pack() + event.pack(), self.peer)
            self.header.seq = (self.header.seq + 1) & 0xFFFF
            self.header.mark = False
            duration += DTMF_INTERVAL
            if duration >= DTMF_DURATION:
                break
        final = EventHeader(event=code, end=True, volume=DTMF_VOLUME, duration=DTMF_DURATION)
        for _ in range(3):
            self.sock.sendto(self.header.pack() + final.pack(), self.peer)
            self.header.seq = (self.header.seq + 1) & 0xFFFF

    def receive(self, timeout: float | None = None) -> list[int]:
        """Wait for the next mu-law frame and return its linear samples.

        Packets that are not valid 160-sample mu-law RTP are skipped.
        Raises TimeoutError if no frame arrives within ``timeout`` seconds.
        """
        if self.sock is None:
            raise RuntimeError("session is closed")
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            if deadline is None:
                self.sock.settimeout(None)
            else:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise TimeoutError("no RTP frame received")
                self.sock.settimeout(remaining)
            data = self.sock.recv(_RECV_BUFFER)
            try:
                header = Header.unpack(data)
            except RTPError:
                continue
            if header.pt != ULAW_CODEC.pt or len(data) != HEADER_SIZE + FRAME_SAMPLES:
                continue
            return [ulaw_to_linear(b) for b in data[HEADER_SIZE:]]

    def close(self) -> None:
        """Close the socket; further sends are dropped."""
        if self.sock is not None:
            self.sock.close()
            self.sock = None

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()