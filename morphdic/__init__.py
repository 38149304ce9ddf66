"""Binary morphological dictionary reader and input text buffers."""

__version__ = "0.1.0"