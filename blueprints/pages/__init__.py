"""
Pages Blueprint - Public pages
Handles: Home, Contact, Theme toggle
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
