# voipkit

Small, dependency-free building blocks for the media side of VoIP calls.

- `voipkit.sdp`: parse and format Session Description Protocol payloads
  (`parse`, `new_sdp`, `SDP`, `SDPError`).
- `voipkit.codecs`: `Codec`, `Media` and `Origin` descriptions, the IANA
  static payload types in `STANDARD_CODECS`, and the helpers
  `generate_origin_id` and `is_ipv6`.
- `voipkit.rtp`: RTP `Header` and RFC 2833 `EventHeader` packing and
  unpacking; bad packets raise `RTPError`.
- `voipkit.session`: a UDP RTP `Session` that sends and receives 160-sample
  u-law frames and sends DTMF digits, plus `listen` for binding an RTP port.
- `voipkit.g711`: G.711 u-law conversion (`linear_to_ulaw`, `ulaw_to_linear`)
  and saturating in-place frame mixing (`mix_saturate`).
- `voipkit.dtmf`: converting between telephone event numbers and keypad
  characters (`dtmf_to_char`, `char_to_dtmf`).
- `voipkit.awgn`: `AWGN`, a deterministic white Gaussian noise generator for
  comfort noise.

## Installation

```
pip install .
```

## Parsing an SDP

```python
from voipkit.sdp import parse

sdp = parse(
    "v=0\r\n"
    "o=- 3366701332 3366701332 IN IP4 1.2.3.4\r\n"
    "s=-\r\n"
    "c=IN IP4 1.2.3.4\r\n"
    "t=0 0\r\n"
    "m=audio 32898 RTP/AVP 0 101\r\n"
    "a=rtpmap:101 telephone-event/8000\r\n"
)
print(sdp.addr, sdp.audio.port, [c.name for c in sdp.audio.codecs])
print(sdp.format())
```

Where a static payload type has no `a=rtpmap` line, the IANA codec is filled
in for you. Malformed input raises `SDPError`. To offer media yourself, build
a description with `new_sdp`:

```python
from voipkit.codecs import DTMF_CODEC, ULAW_CODEC
from voipkit.sdp import new_sdp

offer = new_sdp("10.0.0.38", 30126, ULAW_CODEC, DTMF_CODEC)
payload = offer.data()  # UTF-8 bytes, content type "application/sdp"
```

## RTP headers

```python
from voipkit.rtp import EventHeader, Header

packet = Header(mark=True, pt=0, seq=1234, ts=160, ssrc=6789).pack()
assert Header.unpack(packet).seq == 1234

event = EventHeader.unpack(EventHeader(event=5, end=True, volume=6, duration=400).pack())
assert event.duration == 400
```

## Sending and receiving audio

```python
from voipkit.awgn import AWGN
from voipkit.session import Session

noise = AWGN(-45.0)
with Session("127.0.0.1", peer=("127.0.0.1", 40000)) as session:
    print("listening on", session.local_address)
    frame = [noise.get() for _ in range(160)]
    session.send(frame)
    session.send_dtmf("5")
```

`Session` binds a random even port between 16384 and 32768 unless the host
string carries a port. While `peer` is `None`, outgoing packets are dropped.
`Session.receive(timeout)` returns the linear samples of the next valid u-law
frame, skipping anything else, and raises `TimeoutError` when none arrives in
time.

## What this package does not do

There is no SIP signalling here: nothing builds, sends or answers INVITE,
ACK, BYE or CANCEL messages, and there is no command for placing a call. The
package also does not talk to a microphone or speaker, and `Session` has no
RTCP, jitter buffer or packet reordering. It supplies the SDP, RTP, codec and
DTMF pieces that such a program would use.

## Running the tests

```
pip install .[test]
pytest
```