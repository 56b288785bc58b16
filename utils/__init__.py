"""
Utils Package - Centralized utility modules initialization
"""

from .helpers import (
    get_content_source,
    get_post_repository,
    get_project_repository,
    load_section,
    format_date
)
from .ui_helpers import (
    NAV_LINKS,
    THEMES,
    THEME_COOKIE,
    is_active,
    nav_link_class,
    get_nav_links,
    normalize_theme,
    get_theme_preference,
    next_theme
)

__all__ = [
    # Helpers
    'get_content_source',
    'get_post_repository',
    'get_project_repository',
    'load_section',
    'format_date',

    # UI Helpers
    'NAV_LINKS',
    'THEMES',
    'THEME_COOKIE',
    'is_active',
    'nav_link_class',
    'get_nav_links',
    'normalize_theme',
    'get_theme_preference',
    'next_theme'
]
