class PaxbotError(Exception):
    """Base class for paxbot failures."""


class DatasetLoadError(PaxbotError):
    """The content file could not be read or does not match the schema."""


class MessageIOError(PaxbotError):
    """A chat client failed to send, edit or react to a message."""
