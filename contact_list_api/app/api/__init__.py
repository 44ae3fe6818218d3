"""
API package containing the HTTP routes.

``router`` in ``api.router`` includes every endpoint module and is
mounted by ``create_app``.
"""
