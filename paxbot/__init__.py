# Paxbot package.
# Fuzzy lookups over a small curated knowledge base, answered as paginated chat responses.

from .consts import PAXBOT_VERSION

__version__ = PAXBOT_VERSION

__all__ = ["__version__"]
