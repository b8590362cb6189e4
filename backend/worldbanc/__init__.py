"""worldbanc: browse and download a host's filesystem over HTTP."""

__version__ = "0.1.0"
