"""bank-core: polymorphic account policies and multi-channel notification dispatch."""

__version__ = "0.1.0"
