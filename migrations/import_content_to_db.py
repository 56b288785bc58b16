"""
Import Script: Markdown content to database
Copies the file-based posts and projects into the tables read by the
"database" content source. Existing rows are updated by slug.

Usage:
    python migrations/import_content_to_db.py [content_dir]
"""

import os
import sys
from datetime import timezone

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from extensions import db
from models import Post, Project
from content import (
    ContentSourceUnavailable, FileContentSource, PostSummary, ProjectSummary, map_records
)


def _first(record, *keys, default=None):
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return default


def _text_list(source, collection, record, *keys):
    """Tag-like field as a list of strings; a single string becomes a one-item list"""
    value = _first(record, *keys, default=[])
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ContentSourceUnavailable(
            source, f"malformed {collection} record '{record.get('slug')}': "
                    f"'{keys[0]}' must be a list of strings"
        )
    return list(value)


def _utc(value):
    # DateTime columns on SQLite drop the offset, so store UTC wall time
    return value.astimezone(timezone.utc)


def _summaries(source, collection, summary_type):
    """Pair each record with its summary, failing the whole import on the first malformed one"""
    records = source.fetch(collection)
    return list(zip(map_records(source, collection, summary_type, records), records))


def import_posts(source):
    """Upsert posts from a content source, returns the number imported"""
    pairs = _summaries(source, 'posts', PostSummary)
    for summary, record in pairs:
        post = Post.query.filter_by(slug=summary.slug).first()
        if not post:
            post = Post(slug=summary.slug)
        post.title = summary.title
        post.excerpt = summary.excerpt
        post.published_at = _utc(summary.published_at)
        post.content = record.get('content', '')
        post.tags = _text_list(source, 'posts', record, 'tags')
        db.session.add(post)

    db.session.commit()
    return len(pairs)


def import_projects(source):
    """Upsert projects from a content source, returns the number imported"""
    pairs = _summaries(source, 'projects', ProjectSummary)
    for summary, record in pairs:
        project = Project.query.filter_by(slug=summary.slug).first()
        if not project:
            project = Project(slug=summary.slug)
        project.title = summary.title
        project.description = summary.description
        project.published_at = _utc(summary.published_at)
        project.demo_url = _first(record, 'demoUrl', 'demo_url', default='')
        project.github_url = _first(record, 'githubUrl', 'github_url', default='')
        project.technologies = _text_list(source, 'projects', record, 'technologies', 'tags')
        db.session.add(project)

    db.session.commit()
    return len(pairs)


def main(argv=None):
    """Main import function"""
    argv = sys.argv[1:] if argv is None else argv

    print("=" * 60)
    print("Markdown to Database Content Import")
    print("=" * 60)

    app = create_app(test_config={'CONTENT_SOURCE': 'database'})
    content_dir = argv[0] if argv else app.config.get('CONTENT_DIR')
    source = FileContentSource(content_dir)

    with app.app_context():
        print("\nCreating database tables...")
        db.create_all()
        print("[OK] Database tables created")

        try:
            print(f"\nImporting posts from {content_dir}...")
            print(f"[OK] {import_posts(source)} posts imported")

            print(f"\nImporting projects from {content_dir}...")
            print(f"[OK] {import_projects(source)} projects imported")
        except ContentSourceUnavailable as e:
            db.session.rollback()
            print(f"Error: {str(e)}")
            return 1

    print("\n" + "=" * 60)
    print("Import completed successfully!")
    print("=" * 60)
    return 0


if __name__ == '__main__':
    sys.exit(main())
