"""Building blocks for VoIP media: SDP, RTP, G.711 u-law, DTMF and comfort noise."""

__version__ = "0.1.0"
__all__ = ["awgn", "codecs", "dtmf", "g711", "rtp", "sdp", "session"]