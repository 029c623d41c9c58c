"""Harmonia API package.

The package re-exports nothing; import ``harmonia.main`` for the ASGI app.
"""
