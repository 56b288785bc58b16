"""
Tests for navigation highlighting, theme helpers and the date filter
"""

from datetime import datetime

import pytest
from flask import request

from utils.helpers import format_date
from utils.ui_helpers import (
    get_nav_links,
    get_theme_preference,
    is_active,
    nav_link_class,
    next_theme,
    normalize_theme,
)


@pytest.mark.parametrize('current, target, expected', [
    ('/posts', '/posts', True),
    ('/posts/hello', '/posts', False),
    ('/', '/posts', False),
    (None, '/posts', False),
])
def test_is_active(current, target, expected):
    assert is_active(current, target) is expected


def test_nav_link_class():
    assert nav_link_class('/contact', '/contact') == 'text-yellow-500 font-medium'
    assert nav_link_class('/', '/contact') == 'hover:text-foreground'


def test_get_nav_links_marks_only_current():
    links = get_nav_links('/posts')
    assert [link['path'] for link in links] == ['/posts', '/projects', '/contact']
    assert [link['active'] for link in links] == [True, False, False]


@pytest.mark.parametrize('theme, expected', [
    ('light', 'dark'),
    ('dark', 'system'),
    ('system', 'light'),
    (None, 'light'),
    ('neon', 'light'),
])
def test_next_theme(theme, expected):
    assert next_theme(theme) == expected


def test_normalize_theme():
    assert normalize_theme('dark') == 'dark'
    assert normalize_theme('') == 'system'


def test_get_theme_preference(app):
    with app.test_request_context('/', headers={'Cookie': 'theme=light'}):
        assert get_theme_preference(request) == 'light'
    with app.test_request_context('/'):
        assert get_theme_preference(request) == 'system'


def test_format_date():
    assert format_date(datetime(2024, 3, 2)) == 'March 02, 2024'
    assert format_date(None) == ''
