"""
Main Routes Blueprint

Handles the article list homepage and the site-wide not-found page.
"""

from flask import Blueprint, render_template, current_app

main_bp = Blueprint('main', __name__)


def get_router():
    """Return the request router wired in by the application factory."""
    return current_app.extensions['article_router']


def render_page(page):
    """Render a page context with its template and status code."""
    return render_template(page.template, **page.as_template_context()), page.status_code


@main_bp.route("/")
def home():
    """Homepage listing every published article, newest first."""
    router = get_router()
    current_app.logger.info(f"Index accessed - {len(router.store)} articles")
    return render_page(router.get_index())


@main_bp.app_errorhandler(404)
def page_not_found(e):
    """Custom 404 error page."""
    return render_page(get_router().not_found())
