"""DevLibGuide — programming-language library directory."""

__version__ = "0.1.0"
