"""Infrastructure shared by every feature."""
