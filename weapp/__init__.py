"""Client for the WeChat mini program server-side APIs, with data decryption, a cache and a logger."""

__version__ = "3.0.0"