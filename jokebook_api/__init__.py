"""
Top‑level package for the Jokebook API.

This file makes ``jokebook_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``jokebook_api.app.app_factory``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
