"""
Article Routes Blueprint

Serves single articles with previous/next navigation.
"""

from flask import Blueprint, current_app
from jinja2 import TemplateNotFound

from .main import get_router, render_page

articles_bp = Blueprint('articles', __name__, url_prefix='/article')


@articles_bp.route("/<path:route>")
def article(route):
    """Display a specific article, or the not-found page."""
    router = get_router()
    page = router.get_article(route.rstrip('/'))

    if page.status_code != 200:
        return render_page(page)

    try:
        response = render_page(page)
    except TemplateNotFound as e:
        return render_page(router.not_found(f"no article body for route '{route}': {e.name}"))

    current_app.logger.info(f"Article accessed: {route}")
    return response
