"""A two-player local platform brawler with weapons, kits and terrain effects."""

__version__ = "0.1.0"