"""
Routes Package - Blueprint Registration

This package organizes Flask routes into modular blueprints for better
code organization and maintainability.
"""

from .main import main_bp
from .articles import articles_bp

__all__ = ['main_bp', 'articles_bp']
