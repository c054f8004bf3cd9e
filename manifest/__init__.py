"""
manifest — składanie manifestów kategorii i manifestu zbiorczego.

Publiczne API:
  render_category_manifest(config, descriptors, heading_prefix) -> str
  render_umbrella_manifest(toolkit, counts)                     -> str
  load_toolkit(path)                                            -> ToolkitConfig
  CategoryConfig, ToolkitConfig, DEFAULT_TOOLKIT
"""

from .categories import (
    DEFAULT_CATEGORIES,
    DEFAULT_TOOLKIT,
    CategoryConfig,
    ToolkitConfig,
    load_toolkit,
    toolkit_from_dict,
)
from .assembler import (
    MANIFEST_FILENAME,
    SCRIPTS_DIR,
    render_category_manifest,
    render_umbrella_manifest,
    short_description,
)
from .markdown import format_table

__all__ = [
    "DEFAULT_CATEGORIES",
    "DEFAULT_TOOLKIT",
    "CategoryConfig",
    "ToolkitConfig",
    "load_toolkit",
    "toolkit_from_dict",
    "MANIFEST_FILENAME",
    "SCRIPTS_DIR",
    "render_category_manifest",
    "render_umbrella_manifest",
    "short_description",
    "format_table",
]
