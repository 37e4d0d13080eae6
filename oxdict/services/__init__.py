"""Services for fetching and presenting dictionary definitions."""

from oxdict.services.definitions import render
from oxdict.services.oxford import OxfordClient

__all__ = ["OxfordClient", "render"]
