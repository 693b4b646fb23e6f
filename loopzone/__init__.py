"""Engine core for a side-scrolling platformer: actors, colliders, courses, resources and timing."""

__version__ = "0.1.0"