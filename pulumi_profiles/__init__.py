"""Select, manage and activate Pulumi backend profiles."""

__version__ = "0.1.0"