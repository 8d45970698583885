"""Exception hierarchy.

Only two things can go wrong in a sprite world: the sprite catalog cannot be
loaded at startup, or a spawn asks for a catalog key that does not exist.
Both are fatal; nothing in the tick path recovers from them.
"""


class SpriteWorldError(Exception):
    """Base class for all sprite_world errors."""


class StartupResourceError(SpriteWorldError):
    """The sprite catalog failed to load or parse."""


class SpriteFormatError(StartupResourceError, ValueError):
    """A resource record list does not describe a valid sprite."""


class MissingCatalogEntry(SpriteWorldError, KeyError):
    """A sprite name was requested that is absent from the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Sprite '{self.name}' is not in the catalog"
