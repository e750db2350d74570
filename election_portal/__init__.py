"""Nepal Election Portal: candidate dataset statistics and filtering."""

__version__ = "0.1.0"
