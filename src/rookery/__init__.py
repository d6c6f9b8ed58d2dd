"""Chess position model with two board representations and pseudo-legal move generation."""

__version__ = "0.1.0"
