"""
Article Site - Personal site serving articles with previous/next navigation
"""
from flask import Flask, request
from jinja2 import ChoiceLoader, FileSystemLoader
import os
from config import get_config
from extensions import csrf, limiter
from routes import main_bp, articles_bp
from services import ArticleStore, RequestRouter, load_site_config
from utils.logger import setup_logger


def set_security_headers(response):
    """Apply security headers to all responses."""
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['X-Frame-Options'] = 'SAMEORIGIN'
    response.headers['X-XSS-Protection'] = '1; mode=block'

    if request.is_secure:
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'

    response.headers['Content-Security-Policy'] = (
        "default-src 'self'; "
        "script-src 'self' 'unsafe-inline'; "
        "style-src 'self' 'unsafe-inline'; "
        "img-src 'self' data: https:; "
        "font-src 'self'; "
        "connect-src 'self'; "
        "frame-ancestors 'self'; "
        "base-uri 'self'; "
        "form-action 'self'"
    )

    response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
    response.headers['Permissions-Policy'] = 'geolocation=(), microphone=(), camera=()'

    return response


def create_app(config_class=None, store=None):
    """
    Application factory.

    Loads the site config and the article snapshot once; both are fatal
    on error, so a broken content tree stops the process from starting.

    Args:
        config_class: Config class to load (defaults to FLASK_ENV's)
        store: Pre-built ArticleStore, skips loading from ARTICLES_DIR

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)
    app.config.from_object(config_class or get_config())

    setup_logger(app)
    app.after_request(set_security_headers)

    # Initialize extensions
    csrf.init_app(app)
    limiter.init_app(app)

    # Load articles
    if store is None:
        site_config = load_site_config(app.config['SITE_CONFIG_FILE'])
        store = ArticleStore.load(app.config['ARTICLES_DIR'], site_config)
        app.logger.info(
            f"Loaded {len(store)} articles from {app.config['ARTICLES_DIR']} "
            f"({site_config.mode.value}: {len(site_config.routes)} routes)"
        )
    app.extensions['article_router'] = RequestRouter(store, logger=app.logger)

    # Article bodies are templates inside the content folders
    app.jinja_loader = ChoiceLoader([
        app.jinja_loader,
        FileSystemLoader(str(store.content_root)),
    ])

    app.register_blueprint(main_bp)
    app.register_blueprint(articles_bp)

    return app


if __name__ == "__main__":
    app = create_app()

    # Get configuration from app config (already loaded)
    debug_mode = app.config.get('DEBUG', False)
    env_name = os.environ.get('FLASK_ENV', 'development')

    # Display startup information
    print("=" * 60)
    print(f"Article Site Starting")
    print(f"Environment: {env_name}")
    print(f"Debug Mode: {debug_mode}")
    print("=" * 60)

    if debug_mode and env_name == 'production':
        print("\n⚠️  WARNING: Debug mode enabled in production!")
        print("This is a security risk. Set FLASK_DEBUG=false\n")

    # Get host and port from environment or use defaults
    host = os.environ.get('FLASK_HOST', '127.0.0.1')
    port = int(os.environ.get('FLASK_PORT', app.config['DEFAULT_PORT']))

    app.run(host=host, port=port, debug=debug_mode)
