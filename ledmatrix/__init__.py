"""LED strip and matrix models with colours, masks, animations and small games."""

__version__ = "0.1.0"