"""Game engine building blocks: events, layers, input state, logging, profiling, buffer layouts, cameras, render passes and scenes."""

__version__ = "0.1.0"