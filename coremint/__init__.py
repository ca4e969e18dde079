"""CoreMint: knowledge smelting engine with a personal, tag-organized library."""

__version__ = "1.0.0"
