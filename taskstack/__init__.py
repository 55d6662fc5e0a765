"""Stack-based task scheduler with CBOR-serialized tasks and data."""

__version__ = "0.1.0"