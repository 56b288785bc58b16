"""
API Routes - JSON post and project listings
"""

from flask import jsonify, request, current_app
from content import ContentSourceUnavailable, InvalidLimit
from utils.helpers import get_post_repository, get_project_repository
from . import api_bp


def _limit_arg():
    """Read ?limit= as an int, leaving range checks to the repository"""
    raw = request.args.get('limit')
    if raw is None or raw == '':
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidLimit(raw)


def _listing(fetch):
    try:
        items = fetch(_limit_arg())
    except InvalidLimit as e:
        return jsonify({'error': str(e)}), 400
    except ContentSourceUnavailable as e:
        current_app.logger.error(f"API content error: {str(e)}")
        return jsonify({'error': 'Content is temporarily unavailable'}), 503

    return jsonify({
        'items': [item.to_dict() for item in items],
        'count': len(items)
    })


@api_bp.route('/posts')
def list_posts():
    """Post summaries as JSON"""
    return _listing(get_post_repository().list_posts)


@api_bp.route('/projects')
def list_projects():
    """Project summaries as JSON"""
    return _listing(get_project_repository().list_projects)
