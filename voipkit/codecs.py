"""SDP codec, media and origin descriptions and the IANA codec table."""

from __future__ import annotations

import ipaddress
import secrets
from dataclasses import dataclass, field

# Written when an address is missing so the output stays well formed.
FALLBACK_ADDR = "69.28.157.198"


def generate_origin_id() -> str:
    """Return a random decimal session id for an SDP origin line."""
    return str(secrets.randbits(63))


def is_ipv6(addr: str) -> bool:
    """Return True if ``addr`` is a literal IPv6 address."""
    try:
        return ipaddress.ip_address(addr).version == 6
    except ValueError:
        return False


@dataclass(frozen=True)
class Codec:
    """One codec of an SDP media description.

    ``pt`` is the 7-bit RTP payload type, ``rate`` the clock rate in hertz,
    ``param`` an optional extra (often the channel count) and ``fmtp`` any
    format parameters such as ``"0-16"`` for telephone events.
    """

    pt: int
    name: str = ""
    rate: int = 0
    param: str = ""
    fmtp: str = ""

    def format(self) -> str:
        """Render the ``a=rtpmap`` line and, if set, the ``a=fmtp`` line."""
        line = f"a=rtpmap:{self.pt} {self.name}/{self.rate}"
        if self.param:
            line += f"/{self.param}"
        out = line + "\r\n"
        if self.fmtp:
            out += f"a=fmtp:{self.pt} {self.fmtp}\r\n"
        return out


ULAW_CODEC = Codec(pt=0, name="PCMU", rate=8000)
DTMF_CODEC = Codec(pt=101, name="telephone-event", rate=8000, fmtp="0-16")
OPUS = Codec(pt=111, name="opus", rate=48000, param="2")

STANDARD_CODECS: dict[int, Codec] = {
    0: ULAW_CODEC,
    3: Codec(pt=3, name="GSM", rate=8000),
    4: Codec(pt=4, name="G723", rate=8000),
    5: Codec(pt=5, name="DVI4", rate=8000),
    6: Codec(pt=6, name="DVI4", rate=16000),
    7: Codec(pt=7, name="LPC", rate=8000),
    8: Codec(pt=8, name="PCMA", rate=8000),
    9: Codec(pt=9, name="G722", rate=8000),
    10: Codec(pt=10, name="L16", rate=44100, param="2"),
    11: Codec(pt=11, name="L16", rate=44100),
    12: Codec(pt=12, name="QCELP", rate=8000),
    13: Codec(pt=13, name="CN", rate=8000),
    14: Codec(pt=14, name="MPA", rate=90000),
    15: Codec(pt=15, name="G728", rate=8000),
    16: Codec(pt=16, name="DVI4", rate=11025),
    17: Codec(pt=17, name="DVI4", rate=22050),
    18: Codec(pt=18, name="G729", rate=8000),
    25: Codec(pt=25, name="CelB", rate=90000),
    26: Codec(pt=26, name="JPEG", rate=90000),
    28: Codec(pt=28, name="nv", rate=90000),
    31: Codec(pt=31, name="H261", rate=90000),
    32: Codec(pt=32, name="MPV", rate=90000),
    33: Codec(pt=33, name="MP2T", rate=90000),
    34: Codec(pt=34, name="H263", rate=90000),
}


@dataclass
class Media:
    """The m= line and codec attributes for one kind of media."""

    proto: str = ""
    port: int = 0
    codecs: list[Codec] = field(default_factory=list)

    def format(self, kind: str) -> str:
        """Render the m= line for ``kind`` (audio, video) and its codecs."""
        proto = self.proto or "RTP/AVP"
        pts = "".join(f" {codec.pt}" for codec in self.codecs)
        lines = [f"m={kind} {self.port} {proto}{pts}\r\n"]
        lines.extend(codec.format() for codec in self.codecs)
        return "".join(lines)


@dataclass
class Origin:
    """The o= line of an SDP."""

    user: str = ""
    id: str = ""
    version: str = ""
    addr: str = ""

    def format(self) -> str:
        """Render the o= line, filling in defaults for missing fields."""
        ident = self.id or generate_origin_id()
        user = self.user or "-"
        version = self.version or ident
        family = "IP6" if is_ipv6(self.addr) else "IP4"
        addr = self.addr or FALLBACK_ADDR
        return f"o={user} {ident} {version} IN {family} {addr}\r\n"