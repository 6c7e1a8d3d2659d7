"""poststudio-mcp: draft social posts and restyle them with Unicode glyphs."""

__version__ = "0.2.0"
