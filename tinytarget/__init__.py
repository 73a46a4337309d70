"""Software model of a SimpleSerial training target: framing, ciphers and programs."""

__version__ = "0.1.0"

__all__ = [
    "aes",
    "app",
    "board",
    "glitchloop",
    "passcheck",
    "simpleserial",
    "tea",
    "xor",
]