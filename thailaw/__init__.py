"""Thai Law Lite - citation parsing, validation and search over Thai statutes."""

__version__ = "0.1.0"
