class LevelParseError(ValueError):
    """Raised when a level plan cannot be turned into a Level."""


class InvalidTileKindError(ValueError):
    """Raised when a collision query names something that is not a TileKind."""
