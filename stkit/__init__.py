"""Terminal emulator helpers: box-drawing rasterisation, URL detection, OSC 7, opacity and new terminals."""

__version__ = "0.9.3"