"""
API Blueprint - JSON listings of posts and projects
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
