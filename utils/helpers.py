"""
Helpers Module - Utility functions shared by the page blueprints
"""

from flask import current_app
from content import ContentSourceUnavailable, PostRepository, ProjectRepository


def get_content_source():
    """Content source built once by the application factory"""
    return current_app.extensions['content_source']


def get_post_repository():
    return PostRepository(get_content_source())


def get_project_repository():
    return ProjectRepository(get_content_source())


def load_section(fetch, limit=None):
    """
    Load one listing section of a page

    A store failure becomes an error flag so the rest of the page still renders.

    Args:
        fetch (callable): Repository listing method (list_posts / list_projects)
        limit (int, optional): Maximum number of items

    Returns:
        dict: {'items': list, 'error': bool}
    """
    try:
        return {'items': fetch(limit), 'error': False}
    except ContentSourceUnavailable as e:
        current_app.logger.error(f"Error loading content: {str(e)}")
        return {'items': [], 'error': True}


def format_date(value, fmt='%B %d, %Y'):
    """Jinja filter rendering a summary date"""
    if not value:
        return ''
    return value.strftime(fmt)


__all__ = [
    'get_content_source',
    'get_post_repository',
    'get_project_repository',
    'load_section',
    'format_date'
]
