"""
Pytest Configuration and Fixtures

Provides shared fixtures for testing the Flask application using the
application factory pattern with clean, isolated test instances built
over temporary content trees.
"""

import json
import os

import pytest

# Config classes read these at import time
os.environ['FLASK_ENV'] = 'testing'
os.environ.setdefault('SECRET_KEY', 'test-secret-key-for-pytest')


def write_article(root, route, title, date, date_int, body=None, **extra):
    """Create an article folder with meta.json and view.html."""
    folder = root / route
    folder.mkdir(parents=True, exist_ok=True)
    meta = {'title': title, 'date': date, 'dateInt': date_int, **extra}
    (folder / 'meta.json').write_text(json.dumps(meta), encoding='utf-8')
    (folder / 'view.html').write_text(body or f"<p>Body of {title}</p>", encoding='utf-8')
    return folder


@pytest.fixture(scope='session')
def test_config():
    """Test configuration class."""
    from config import TestingConfig
    return TestingConfig


@pytest.fixture
def content_root(tmp_path):
    """
    Content tree with three published articles and one draft.

    dateInt values: first=20230101, second=20230201, third=20230301,
    draft=20230401 (newest, but excluded by site_config).
    """
    root = tmp_path / 'articles'
    root.mkdir()
    write_article(root, 'first', 'First Article', 'January 1, 2023', 20230101, tags=['intro'])
    write_article(root, 'second', 'Second Article', 'February 1, 2023', 20230201)
    write_article(root, 'third', 'Third Article', 'March 1, 2023', 20230301)
    write_article(root, 'draft', 'Draft Article', 'April 1, 2023', 20230401)
    return root


@pytest.fixture
def site_config():
    """Exclude-mode config hiding the draft."""
    from models import SiteConfig
    return SiteConfig.excluding(['draft'])


@pytest.fixture
def store(content_root, site_config):
    """ArticleStore loaded from the temporary content tree."""
    from services import ArticleStore
    return ArticleStore.load(content_root, site_config)


@pytest.fixture
def router(store):
    """RequestRouter over the loaded store."""
    from services import RequestRouter
    return RequestRouter(store)


@pytest.fixture
def app(test_config, store):
    """
    Create and configure a Flask application instance for testing.

    Uses the application factory pattern to create a clean instance
    for each test function.
    """
    from app import create_app
    app = create_app(test_config, store=store)

    # Push application context
    ctx = app.app_context()
    ctx.push()

    yield app

    # Clean up
    ctx.pop()


@pytest.fixture
def client(app):
    """
    Flask test client for making HTTP requests.

    Provides a test client that can make requests to the application
    without running a live server.
    """
    return app.test_client()


@pytest.fixture
def disk_config(test_config, content_root, tmp_path):
    """Config class pointing the factory at the temporary content tree."""
    config_file = tmp_path / 'config.json'
    config_file.write_text(json.dumps({'excluded': ['draft']}), encoding='utf-8')

    class DiskConfig(test_config):
        ARTICLES_DIR = content_root
        SITE_CONFIG_FILE = config_file
        ACCESS_LOG_FILE = str(tmp_path / 'log.txt')

    return DiskConfig
