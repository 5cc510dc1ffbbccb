"""GlyphGrid — render images as ASCII art."""

__version__ = "0.1.0"
