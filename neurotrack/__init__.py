"""NeuroTrack - patient and session tracking for neurodevelopmental therapy practices."""

__version__ = "0.1.0"
