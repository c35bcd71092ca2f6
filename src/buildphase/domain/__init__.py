"""Domain layer public exports."""

from .assets import AssetId
from .base import DomainModel
from .builder import Builder, builder_type_name
from .options import BuilderOptions
from .types import BuildExtensions, ConfigMapping, PackageName

__all__ = [
    "AssetId",
    "BuildExtensions",
    "Builder",
    "BuilderOptions",
    "ConfigMapping",
    "DomainModel",
    "PackageName",
    "builder_type_name",
]
