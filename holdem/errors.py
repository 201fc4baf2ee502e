from __future__ import annotations

# Errors also subclass the matching builtin, so callers catching
# ValueError/RuntimeError catch these too.


class PokerError(Exception):
    """Base class for every error raised by the holdem package."""


class HandError(PokerError, ValueError):
    """A hand could not be constructed from the supplied players."""


class InvalidHandSize(HandError):
    pass


class InvalidInput(HandError, TypeError):
    pass


class InvalidAction(PokerError, RuntimeError):
    """A street operation was requested out of order."""


class DeckExhausted(PokerError, ValueError):
    pass


class InvalidCardFormat(PokerError, ValueError):
    pass
