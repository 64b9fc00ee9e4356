"""Game rules for a side-scrolling platformer: collision, characters, behaviours and screens."""

__version__ = "0.1.0"