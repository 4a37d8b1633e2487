"""
WSGI compatibility layer.

Wraps the ASGI products application for WSGI servers
such as Gunicorn or Waitress. Prefer ASGI deployment when possible.
"""

from a2wsgi import ASGIMiddleware

from products_api.main import app

application = ASGIMiddleware(app)
