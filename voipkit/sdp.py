"""Session Description Protocol parsing and formatting.

An SDP is the payload of a SIP INVITE or its answer that tells the other
side where to send media and which codecs are understood.
"""

from __future__ import annotations

import dataclasses
import ipaddress
import logging
import re
from dataclasses import dataclass, field

from .codecs import (
    FALLBACK_ADDR,
    STANDARD_CODECS,
    Codec,
    Media,
    Origin,
    generate_origin_id,
    is_ipv6,
)

log = logging.getLogger(__name__)

CONTENT_TYPE = "application/sdp"
MAX_LENGTH = 1450

DEFAULT_SESSION = "my people call themselves dark angels"
PARSED_SESSION = "pokémon"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT_RE = re.compile(r"[0-9]+")


class SDPError(ValueError):
    """Raised when an SDP payload cannot be parsed."""


@dataclass
class SDP:
    """A session description: origin, connection address and media."""

    CONTENT_TYPE = CONTENT_TYPE

    origin: Origin = field(default_factory=Origin)
    addr: str = ""
    audio: Media | None = None
    video: Media | None = None
    session: str = ""
    time: str = ""
    ptime: int = 0
    send_only: bool = False
    recv_only: bool = False
    attrs: list[tuple[str, str]] = field(default_factory=list)
    other: list[tuple[str, str]] = field(default_factory=list)

    def format(self) -> str:
        """Render the description as SDP text."""
        out = ["v=0\r\n", self.origin.format()]
        out.append(f"s={self.session or DEFAULT_SESSION}\r\n")
        family = "IP6" if is_ipv6(self.addr) else "IP4"
        out.append(f"c=IN {family} {self.addr or FALLBACK_ADDR}\r\n")
        out.append(f"t={self.time or '0 0'}\r\n")
        if self.audio is not None:
            out.append(self.audio.format("audio"))
        if self.video is not None:
            out.append(self.video.format("video"))
        for name, value in self.attrs:
            if value:
                out.append(f"a={name}:{value}\r\n")
            else:
                out.append(f"a={name}\r\n")
        if self.ptime > 0:
            out.append(f"a=ptime:{self.ptime}\r\n")
        if self.send_only:
            out.append("a=sendonly\r\n")
        elif self.recv_only:
            out.append("a=recvonly\r\n")
        else:
            out.append("a=sendrecv\r\n")
        for name, value in self.other:
            out.append(f"{name}={value}\r\n")
        return "".join(out)

    def data(self) -> bytes:
        """Return the formatted description encoded as UTF-8."""
        return self.format().encode("utf-8")

    def __str__(self) -> str:
        return self.format()


def new_sdp(host: str, port: int, *args: Codec) -> SDP:
    """Create a basic audio SDP for ``host``:``port`` offering ``args`` codecs."""
    try:
        addr = str(ipaddress.ip_address(host))
    except ValueError:
        addr = host
    ident = generate_origin_id()
    return SDP(
        origin=Origin(id=ident, version=ident, addr=addr),
        addr=addr,
        audio=Media(proto="RTP/AVP", port=port, codecs=list(args)),
    )


def parse(text: str) -> SDP:
    """Parse SDP text into an :class:`SDP`, raising SDPError on bad input."""
    if not text.startswith("v=0\r\n"):
        raise SDPError("sdp must start with v=0\\r\\n")
    lines = text[5:].split("\r\n")
    if len(lines) < 2:
        raise SDPError("too few lines in sdp")

    sdp = SDP(session=PARSED_SESSION, time="0 0")
    audioinfo = videoinfo = ""
    rtpmaps: list[str] = []
    fmtps: list[str] = []
    ok_origin = ok_conn = False

    for line in lines:
        if line == "":
            continue
        if len(line) < 3 or line[1] != "=":
            log.warning("Bad line in SDP: %s", line)
            continue
        kind, body = line[0], line[2:]
        if kind == "m":
            if body.startswith("audio "):
                audioinfo = body[6:]
            elif body.startswith("video "):
                videoinfo = body[6:]
            else:
                log.warning("Unsupported SDP media line: %s", body)
        elif kind == "s":
            sdp.session = body
        elif kind == "t":
            sdp.time = body
        elif kind == "c":
            if ok_conn:
                log.warning("Dropping extra c= line in sdp: %s", line)
                continue
            sdp.addr = _parse_conn_line(body)
            ok_conn = True
        elif kind == "o":
            sdp.origin = _parse_origin_line(body)
            ok_origin = True
        elif kind == "a":
            _parse_attribute(sdp, body, rtpmaps, fmtps)
        else:
            name, sep, value = line.partition("=")
            if sep and not name:
                log.warning("Evil SDP field: %s", line)
            else:
                sdp.other.append((name, value))

    if not ok_conn or not ok_origin:
        raise SDPError("sdp missing mandatory information")

    if audioinfo:
        sdp.audio = _build_media(audioinfo, rtpmaps, fmtps)
    if videoinfo:
        sdp.video = _build_media(videoinfo, rtpmaps, fmtps)
    if sdp.audio is None and sdp.video is None:
        raise SDPError("sdp has no audio or video information")
    return sdp


def _parse_attribute(sdp: SDP, body: str, rtpmaps: list[str], fmtps: list[str]) -> None:
    if body.startswith("rtpmap:"):
        rtpmaps.append(body[7:])
    elif body.startswith("fmtp:"):
        fmtps.append(body[5:])
    elif body.startswith("ptime:"):
        value = body[6:]
        if _INT_RE.fullmatch(value) and int(value) > 0:
            sdp.ptime = int(value)
        else:
            log.warning("Invalid SDP Ptime value %s", value)
    elif body == "sendrecv":
        pass
    elif body == "sendonly":
        sdp.send_only = True
    elif body == "recvonly":
        sdp.recv_only = True
    else:
        name, sep, value = body.partition(":")
        if sep and not name:
            log.warning("Evil SDP attribute: %s", body)
        else:
            sdp.attrs.append((name, value))


def _build_media(info: str, rtpmaps: list[str], fmtps: list[str]) -> Media:
    port, proto, pts = _parse_media_info(info)
    return Media(proto=proto, port=port, codecs=[_resolve_codec(pt, rtpmaps, fmtps) for pt in pts])


def _resolve_codec(pt: int, rtpmaps: list[str], fmtps: list[str]) -> Codec:
    """Build the codec for ``pt``, falling back to the IANA table if unmapped."""
    prefix = f"{pt} "
    codec = Codec(pt=pt)
    rtpmap = next((r for r in rtpmaps if r.startswith(prefix)), None)
    if rtpmap is not None:
        codec = _parse_rtpmap_info(pt, rtpmap[len(prefix):])
    if not codec.name:
        if pt >= 96:
            raise SDPError("dynamic codec missing rtpmap")
        try:
            codec = STANDARD_CODECS[pt]
        except KeyError:
            raise SDPError(f"unknown iana codec id: {pt}") from None
    fmtp = next((f for f in fmtps if f.startswith(prefix)), None)
    if fmtp is not None:
        codec = dataclasses.replace(codec, fmtp=fmtp[len(prefix):])
    return codec


def _parse_rtpmap_info(pt: int, text: str) -> Codec:
    """Parse the ``PCMU/8000`` or ``L16/16000/2`` part of an rtpmap."""
    toks = text.split("/")
    if len(toks) < 2:
        raise SDPError("invalid rtpmap")
    if not _INT_RE.fullmatch(toks[1]):
        raise SDPError("invalid rtpmap rate")
    param = toks[2] if len(toks) >= 3 else ""
    return Codec(pt=pt, name=toks[0], rate=int(toks[1]), param=param)


def _parse_media_info(text: str) -> tuple[int, str, list[int]]:
    """Parse the ``30126 RTP/AVP 0 101`` part of an m= line."""
    toks = text.split(" ")
    if len(toks) < 3:
        raise SDPError("invalid m= line")
    port_text = toks[0]
    slash = port_text.find("/")
    if slash > 0:
        port_text = port_text[:slash]
    if not _UINT_RE.fullmatch(port_text) or int(port_text) > 0xFFFF:
        raise SDPError("invalid m= port")
    pts = []
    for tok in toks[2:]:
        if not _UINT_RE.fullmatch(tok) or int(tok) > 0xFF:
            raise SDPError("invalid pt in m= line")
        pts.append(int(tok))
    return int(port_text), toks[1], pts


def _parse_conn_line(body: str) -> str:
    """Parse the ``IN IP4 10.0.0.38`` part of a c= line."""
    toks = body.split(" ")
    if len(toks) != 3:
        raise SDPError("invalid conn line")
    if toks[0] != "IN" or toks[1] not in ("IP4", "IP6"):
        raise SDPError("unsupported conn net type")
    if "/" in toks[2]:
        raise SDPError("multicast address in c= line D:")
    return toks[2]


def _parse_origin_line(body: str) -> Origin:
    """Parse the ``root 31589 31589 IN IP4 10.0.0.38`` part of an o= line."""
    toks = body.split(" ")
    if len(toks) != 6:
        raise SDPError("invalid origin line")
    if toks[3] != "IN" or toks[4] not in ("IP4", "IP6"):
        raise SDPError("unsupported origin net type")
    if "/" in toks[5]:
        raise SDPError("multicast address in o= line D:")
    return Origin(user=toks[0], id=toks[1], version=toks[2], addr=toks[5])