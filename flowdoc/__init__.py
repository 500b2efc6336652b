"""flowdoc - Compile, parse and validate messaging-platform Flow Documents."""

__version__ = "0.1.0"
