"""Exception hierarchy for findfont."""


class FindFontError(Exception):
    """Base exception for all findfont errors."""

    pass


class FontNotFoundError(FindFontError):
    """No font file matched the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"cannot find font '{name}' in user or system directories")
