"""
Controllers Package

Thin HTTP blueprints over the game services.
"""
