"""
Portfolio - Main Application Entry Point
Application Factory Pattern for a modular architecture

This module initializes the Flask application with its configuration,
extensions and content source. All actual route handling is delegated to blueprints.
"""

import os
from datetime import datetime
from flask import Flask, render_template, request
from config import get_config
from extensions import db
from content import build_content_source, validate_limit
from utils.helpers import format_date
from utils.ui_helpers import get_nav_links, get_theme_preference, next_theme

# Import all blueprints
from blueprints.pages import pages_bp
from blueprints.posts import posts_bp
from blueprints.projects import projects_bp
from blueprints.api import api_bp


def create_app(config_name=None, test_config=None, content_source=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        test_config (dict): Config overrides applied after the config class (optional)
        content_source: Content source handle to use instead of the configured one (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Home page limits come from the environment; reject bad values at startup
    for key in ('HOME_POST_LIMIT', 'HOME_PROJECT_LIMIT'):
        app.config[key] = validate_limit(app.config.get(key))

    # Initialize extensions with app
    initialize_extensions(app)

    # Content source shared by every request; sources hold no mutable state
    app.extensions['content_source'] = content_source or build_content_source(app.config)
    app.logger.info(f"✓ Content source: {app.extensions['content_source']!r}")

    # Register Jinja filters
    app.jinja_env.filters['format_date'] = format_date

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)

    if app.config.get('CONTENT_SOURCE') != 'database':
        return

    # Create tables if they don't exist
    with app.app_context():
        try:
            from sqlalchemy import text
            import models  # noqa: F401
            db.create_all()
            # Verify connection
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database initialized successfully")
        except Exception as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(posts_bp)
    app.register_blueprint(projects_bp)
    app.register_blueprint(api_bp)


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(400)
    def bad_request(e):
        return render_template('400.html'), 400

    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('404.html'), 404

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return render_template('500.html'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        """Site-wide template context: navigation, theme and metadata"""
        current_theme = get_theme_preference(request)

        return {
            'nav_links': get_nav_links(request.path),
            'current_theme': current_theme,
            'next_theme': next_theme(current_theme),
            'site_title': app.config.get('SITE_TITLE'),
            'site_description': app.config.get('SITE_DESCRIPTION'),
            'author_name': app.config.get('AUTHOR_NAME'),
            'author_initials': app.config.get('AUTHOR_INITIALS'),
            'current_year': datetime.now().year
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        return response


# Create app instance for gunicorn
app = create_app()

if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=5000,
        debug=(env == 'development')
    )
