"""Chess position-and-rules engine with move history and notation."""

__version__ = "0.1.0"
