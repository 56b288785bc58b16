"""
Posts Routes - Full list of blog posts
"""

from flask import render_template
from utils.helpers import get_post_repository, load_section
from . import posts_bp


@posts_bp.route('')
def index():
    """All posts, newest first"""
    posts = load_section(get_post_repository().list_posts)
    return render_template('posts.html', posts=posts)
