"""
Content Sources - Read-only handles onto the store holding posts and projects

Every source exposes ``fetch(collection)`` returning a list of raw record
dicts for ``'posts'`` or ``'projects'``. Sources never cache: each call
re-reads the store, so concurrent requests share nothing mutable.
"""

import logging
import os

import requests
import yaml
from sqlalchemy.exc import SQLAlchemyError

from .errors import ContentSourceUnavailable

logger = logging.getLogger(__name__)

COLLECTIONS = ('posts', 'projects')


def _check_collection(collection):
    if collection not in COLLECTIONS:
        raise ValueError(f"Unknown content collection: {collection}")


def parse_front_matter(text):
    """
    Split a markdown document into its YAML front matter and body

    Returns:
        tuple: (front matter dict or None, body text)
    """
    text = text.replace('\r\n', '\n').replace('\r', '\n').lstrip('\ufeff')
    if not text.startswith('---\n'):
        return None, text
    lines = text.splitlines(keepends=True)
    for i in range(1, len(lines)):
        if lines[i].strip() == '---':
            front_matter = yaml.safe_load(''.join(lines[1:i])) or {}
            return front_matter, ''.join(lines[i + 1:])
    return None, text


class FileContentSource:
    """Markdown files with YAML front matter, one directory per collection"""

    def __init__(self, root, extensions=('.md', '.mdx')):
        self.root = root
        self.extensions = tuple(extensions)

    def __repr__(self):
        return f"FileContentSource({self.root!r})"

    def fetch(self, collection):
        _check_collection(collection)
        directory = os.path.join(self.root, collection)
        try:
            filenames = sorted(os.listdir(directory))
        except OSError as e:
            raise ContentSourceUnavailable(directory, str(e)) from e

        records = []
        for filename in filenames:
            stem, ext = os.path.splitext(filename)
            if ext.lower() not in self.extensions:
                continue
            path = os.path.join(directory, filename)
            records.append(self._read_record(path, stem))

        logger.debug(f"Loaded {len(records)} {collection} from {directory}")
        return records

    def _read_record(self, path, slug):
        try:
            with open(path, 'r', encoding='utf-8') as file:
                front_matter, body = parse_front_matter(file.read())
        except (OSError, UnicodeDecodeError) as e:
            raise ContentSourceUnavailable(path, str(e)) from e
        except yaml.YAMLError as e:
            raise ContentSourceUnavailable(path, f"invalid front matter: {e}") from e

        if not isinstance(front_matter, dict):
            raise ContentSourceUnavailable(path, "missing front matter")

        record = dict(front_matter)
        record['slug'] = slug
        record['content'] = body
        return record


class HttpContentSource:
    """Remote headless CMS serving JSON collections at <base_url>/<collection>"""

    def __init__(self, base_url, timeout=5.0, session=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def __repr__(self):
        return f"HttpContentSource({self.base_url!r})"

    def fetch(self, collection):
        _check_collection(collection)
        url = f"{self.base_url}/{collection}"
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.Timeout as e:
            raise ContentSourceUnavailable(url, f"timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            raise ContentSourceUnavailable(url, str(e)) from e
        except ValueError as e:
            raise ContentSourceUnavailable(url, f"invalid JSON: {e}") from e

        if isinstance(payload, dict):
            payload = payload.get('items')
        if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
            raise ContentSourceUnavailable(url, "expected a list of records")

        logger.debug(f"Fetched {len(payload)} {collection} from {url}")
        return payload


class DatabaseContentSource:
    """Posts and projects tables through Flask-SQLAlchemy (needs an app context)"""

    def __repr__(self):
        return "DatabaseContentSource()"

    def fetch(self, collection):
        _check_collection(collection)
        from models import Post, Project

        model = Post if collection == 'posts' else Project
        try:
            rows = model.query.all()
        except SQLAlchemyError as e:
            raise ContentSourceUnavailable(model.__tablename__, str(e)) from e
        return [row.to_record() for row in rows]


def build_content_source(config):
    """
    Build the content source named by the application config

    Args:
        config (Mapping): Flask config with CONTENT_SOURCE and its settings

    Returns:
        A source object exposing fetch(collection)
    """
    kind = config.get('CONTENT_SOURCE', 'files')
    if kind == 'files':
        return FileContentSource(config.get('CONTENT_DIR', 'content_files'))
    if kind == 'http':
        base_url = config.get('CONTENT_API_URL')
        if not base_url:
            raise ValueError("CONTENT_API_URL is required for the http content source")
        return HttpContentSource(base_url, timeout=config.get('CONTENT_TIMEOUT', 5.0))
    if kind == 'database':
        return DatabaseContentSource()
    raise ValueError(f"Unknown CONTENT_SOURCE: {kind}")


__all__ = [
    'COLLECTIONS',
    'parse_front_matter',
    'FileContentSource',
    'HttpContentSource',
    'DatabaseContentSource',
    'build_content_source'
]
