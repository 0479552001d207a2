"""Infrastructure layer: structure file access."""
