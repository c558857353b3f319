[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voipkit"
version = "0.1.0"
description = "Building blocks for VoIP media: SDP parsing and formatting, RTP headers and sessions, G.711 u-law, DTMF events and comfort noise."
requires-python = ">=3.10"
dependencies = []
keywords = ["voip", "sdp", "rtp", "g711", "ulaw", "dtmf", "telephony"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Internet Phone",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["voipkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
