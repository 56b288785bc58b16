"""
Projects Routes - Full list of projects
"""

from flask import render_template
from utils.helpers import get_project_repository, load_section
from . import projects_bp


@projects_bp.route('')
def index():
    """All projects, most recent first"""
    projects = load_section(get_project_repository().list_projects)
    return render_template('projects.html', projects=projects)
