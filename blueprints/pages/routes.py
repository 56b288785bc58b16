"""
Pages Routes - Home, contact and theme preference
"""

from urllib.parse import urlparse

from flask import render_template, redirect, url_for, request, abort, current_app
from utils.helpers import get_post_repository, get_project_repository, load_section
from utils.ui_helpers import THEME_COOKIE, THEMES, get_theme_preference, next_theme
from . import pages_bp


@pages_bp.route('/')
def index():
    """Home page - intro, recent posts, recent projects, newsletter"""
    posts = load_section(get_post_repository().list_posts,
                         current_app.config.get('HOME_POST_LIMIT'))
    projects = load_section(get_project_repository().list_projects,
                            current_app.config.get('HOME_PROJECT_LIMIT'))

    return render_template('index.html', posts=posts, projects=projects)


@pages_bp.route('/contact')
def contact():
    """Contact page"""
    return render_template('contact.html')


@pages_bp.route('/theme', methods=['POST'])
def set_theme():
    """Persist the theme preference in a cookie and return to the referring page"""
    requested = request.form.get('theme')
    if requested is None:
        theme = next_theme(get_theme_preference(request))
    elif requested in THEMES:
        theme = requested
    else:
        abort(400)

    response = redirect(_safe_referrer() or url_for('pages.index'))
    response.set_cookie(
        THEME_COOKIE,
        theme,
        max_age=current_app.config.get('THEME_COOKIE_MAX_AGE'),
        samesite='Lax'
    )
    current_app.logger.debug(f"Theme preference set to {theme}")
    return response


def _safe_referrer():
    """Referrer path on this host only"""
    referrer = request.referrer
    if not referrer:
        return None
    parsed = urlparse(referrer)
    if parsed.netloc and parsed.netloc != request.host:
        return None
    return parsed.path or None
