"""confdocs - render configuration setting reference docs as AsciiDoc."""

__version__ = "0.1.0"
