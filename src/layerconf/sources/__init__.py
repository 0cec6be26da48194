"""Property sources: environment, process properties, user settings, and files."""

from layerconf.sources.base import PropertySource
from layerconf.sources.files import (
    ConfigFilePropertySource,
    FileSource,
    PathFileSource,
    ResourceFileSource,
    file_sources_from_paths,
    file_sources_from_resources,
)
from layerconf.sources.system import (
    EnvironmentVariablesPropertySource,
    ProcessPropertiesPropertySource,
)
from layerconf.sources.user_settings import (
    UserSettingsPropertySource,
    default_property_sources,
)

__all__ = [
    "ConfigFilePropertySource",
    "EnvironmentVariablesPropertySource",
    "FileSource",
    "PathFileSource",
    "ProcessPropertiesPropertySource",
    "PropertySource",
    "ResourceFileSource",
    "UserSettingsPropertySource",
    "default_property_sources",
    "file_sources_from_paths",
    "file_sources_from_resources",
]
