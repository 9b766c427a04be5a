class LevelPackDecodeError(Exception):
    """Raised when a level pack cannot be read or decoded."""
