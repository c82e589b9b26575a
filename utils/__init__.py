"""
Utilities Package

Shared helpers for application setup such as logging.
"""
