"""Invoice API: contract and invoice management for contracted employees."""

__version__ = "0.1.0"
