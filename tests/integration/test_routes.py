"""
Integration Tests for Routes

Tests the Flask blueprints and route handlers to ensure proper HTTP
responses and template rendering.
"""

import pytest


class TestMainRoutes:
    """Test main blueprint routes."""

    def test_homepage_loads(self, client):
        """Test: Homepage returns 200 OK."""
        response = client.get('/')
        assert response.status_code == 200

    def test_homepage_lists_articles_newest_first(self, client):
        """Test: Homepage lists published articles in date order."""
        html = client.get('/').get_data(as_text=True)

        assert html.index('Third Article') < html.index('Second Article') < html.index('First Article')

    def test_homepage_shows_last_published(self, client):
        """Test: Homepage shows the latest publish date."""
        response = client.get('/')
        assert b'Last published March 1, 2023' in response.data

    def test_homepage_hides_excluded(self, client):
        """Test: Excluded articles are not listed."""
        response = client.get('/')
        assert b'Draft Article' not in response.data

    def test_404_page(self, client):
        """Test: Non-existent page returns 404 with the latest date."""
        response = client.get('/nonexistent-page')

        assert response.status_code == 404
        assert b'Page not found' in response.data
        assert b'March 1, 2023' in response.data


class TestArticleRoutes:
    """Test article blueprint routes."""

    def test_article_page_loads(self, client):
        """Test: Article page returns 200 OK."""
        response = client.get('/article/second')
        assert response.status_code == 200

    def test_article_renders_body(self, client):
        """Test: Article body template is included."""
        response = client.get('/article/second')
        assert b'Body of Second Article' in response.data

    def test_article_navigation_links(self, client):
        """Test: Previous and next links follow the ring."""
        html = client.get('/article/second').get_data(as_text=True)

        assert 'class="previous" href="/article/first"' in html
        assert 'class="next" href="/article/third"' in html

    def test_newest_article_wraps(self, client):
        """Test: Newest article's next link is the oldest article."""
        html = client.get('/article/third').get_data(as_text=True)
        assert 'class="next" href="/article/first"' in html

    def test_invalid_article_404(self, client):
        """Test: Invalid article returns 404."""
        response = client.get('/article/nonexistent-article')

        assert response.status_code == 404
        assert b'March 1, 2023' in response.data

    def test_excluded_article_404(self, client):
        """Test: Excluded article returns 404."""
        response = client.get('/article/draft')
        assert response.status_code == 404

    def test_missing_article_body_404(self, client, content_root):
        """Test: Article with metadata but no view.html renders the not-found page."""
        (content_root / 'second' / 'view.html').unlink()

        response = client.get('/article/second')

        assert response.status_code == 404
        assert b'Page not found' in response.data
        assert b'March 1, 2023' in response.data

    def test_trailing_slash(self, client):
        """Test: A trailing slash serves the same article."""
        response = client.get('/article/second/')

        assert response.status_code == 200
        assert b'Body of Second Article' in response.data

    def test_nested_path_404(self, client):
        """Test: Paths below an article folder return 404."""
        response = client.get('/article/first/meta.json')
        assert response.status_code == 404


class TestEmptySite:
    """Test routes when nothing is published."""

    @pytest.fixture
    def empty_client(self, test_config, tmp_path):
        from app import create_app
        from models import SiteConfig
        from services import ArticleStore

        app = create_app(test_config, store=ArticleStore.load(tmp_path, SiteConfig.releasing()))
        return app.test_client()

    def test_index_404_when_empty(self, empty_client):
        """Test: Index renders the not-found view when no article is published."""
        response = empty_client.get('/')

        assert response.status_code == 404
        assert b'Last published' not in response.data


class TestBlueprintEndpoints:
    """Test that blueprint endpoints are properly registered."""

    def test_main_blueprint_registered(self, app):
        """Test: main blueprint is registered."""
        assert 'main.home' in [rule.endpoint for rule in app.url_map.iter_rules()]

    def test_articles_blueprint_registered(self, app):
        """Test: articles blueprint is registered with /article prefix."""
        rules = {rule.endpoint: rule.rule for rule in app.url_map.iter_rules()}

        assert rules['articles.article'] == '/article/<path:route>'

    def test_static_route(self, app):
        """Test: static files are served under /static."""
        rules = {rule.endpoint: rule.rule for rule in app.url_map.iter_rules()}
        assert rules['static'] == '/static/<path:filename>'
