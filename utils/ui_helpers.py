"""
UI Helper Functions for navigation highlighting and the theme toggle
====================================================================

Everything here is pure presentation: route matching for the header links
and resolving the visitor's light/dark/system theme preference.
"""

from typing import List, Optional, Tuple


NAV_LINKS: List[Tuple[str, str]] = [
    ('Posts', '/posts'),
    ('Projects', '/projects'),
    ('Contact', '/contact'),
]

ACTIVE_LINK_CLASS = 'text-yellow-500 font-medium'
INACTIVE_LINK_CLASS = 'hover:text-foreground'

THEMES = ('light', 'dark', 'system')
DEFAULT_THEME = 'system'
THEME_COOKIE = 'theme'


def is_active(current_path: Optional[str], target_path: str) -> bool:
    """
    Whether a navigation link points at the page being rendered

    Example:
        >>> is_active('/posts', '/posts')
        True
        >>> is_active('/posts/hello', '/posts')
        False
    """
    return current_path == target_path


def nav_link_class(current_path: Optional[str], target_path: str) -> str:
    """CSS classes for a header link"""
    return ACTIVE_LINK_CLASS if is_active(current_path, target_path) else INACTIVE_LINK_CLASS


def get_nav_links(current_path: Optional[str]) -> List[dict]:
    return [
        {
            'label': label,
            'path': path,
            'active': is_active(current_path, path),
            'css_class': nav_link_class(current_path, path),
        }
        for label, path in NAV_LINKS
    ]


def normalize_theme(theme: Optional[str]) -> str:
    if theme in THEMES:
        return theme
    return DEFAULT_THEME


def get_theme_preference(request) -> str:
    """Theme stored in the visitor's cookie, 'system' when unset or unknown"""
    return normalize_theme(request.cookies.get(THEME_COOKIE))


def next_theme(theme: Optional[str]) -> str:
    """Theme the toggle switches to: light -> dark -> system -> light"""
    current = normalize_theme(theme)
    return THEMES[(THEMES.index(current) + 1) % len(THEMES)]


__all__ = [
    'NAV_LINKS',
    'THEMES',
    'DEFAULT_THEME',
    'THEME_COOKIE',
    'is_active',
    'nav_link_class',
    'get_nav_links',
    'normalize_theme',
    'get_theme_preference',
    'next_theme'
]
