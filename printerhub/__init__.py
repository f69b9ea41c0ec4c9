"""printerhub: brand and printer inventory REST service."""

__version__ = "0.1.0"
