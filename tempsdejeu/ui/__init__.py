"""
UI package for the Temps De Jeu statistics engine.

This package contains the Flask server exposing statistics as JSON.
"""
from .web_app import create_app, run_web_app

__all__ = ["create_app", "run_web_app"]
