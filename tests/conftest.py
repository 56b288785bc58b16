"""
Test configuration and shared fixtures
"""

from datetime import datetime, timezone

import pytest

from app import create_app
from content import ContentSourceUnavailable
from extensions import db


class InMemoryContentSource:
    """Test double holding records per collection, optionally failing every fetch"""

    def __init__(self, posts=None, projects=None, fail=False):
        self.records = {'posts': list(posts or []), 'projects': list(projects or [])}
        self.fail = fail
        self.calls = []

    def __repr__(self):
        return 'InMemoryContentSource()'

    def fetch(self, collection):
        self.calls.append(collection)
        if self.fail:
            raise ContentSourceUnavailable(self, 'store offline')
        return [dict(record) for record in self.records[collection]]


def make_post(slug, day, title=None, excerpt=''):
    return {
        'slug': slug,
        'title': title or slug.replace('-', ' ').title(),
        'publishedAt': datetime(2024, 1, day, tzinfo=timezone.utc),
        'summary': excerpt,
    }


def make_project(slug, day, title=None, description=''):
    return {
        'slug': slug,
        'title': title or slug.replace('-', ' ').title(),
        'publishedAt': f'2024-02-{day:02d}',
        'description': description,
    }


def write_markdown(directory, name, front_matter, body='Body text.\n'):
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(f"---\n{front_matter}---\n\n{body}", encoding='utf-8')
    return path


@pytest.fixture
def source():
    return InMemoryContentSource(
        posts=[make_post(f'post-{day}', day, excerpt=f'Excerpt {day}') for day in range(1, 6)],
        projects=[make_project(f'project-{day}', day) for day in range(1, 4)],
    )


@pytest.fixture
def app(source):
    app = create_app('testing', content_source=source)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_app():
    """App backed by the database content source on in-memory SQLite"""
    app = create_app('testing', test_config={'CONTENT_SOURCE': 'database'})
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()
