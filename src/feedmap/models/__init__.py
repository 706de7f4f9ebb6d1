"""Models package."""

from feedmap.models.category import Category
from feedmap.models.cloud import Cloud
from feedmap.models.enclosure import Enclosure
from feedmap.models.guid import Guid
from feedmap.models.source import Source

__all__ = [
    "Source",
    "Category",
    "Enclosure",
    "Guid",
    "Cloud",
]
