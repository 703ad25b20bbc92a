"""Known languages (langs) and translatable content with fallback chains (content)."""

__version__ = "0.1.0"
__all__ = ["langs", "content"]