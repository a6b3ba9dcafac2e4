"""
API package containing the HTTP routes.

``router`` exposes a top‑level ``router`` which includes the
domain‑specific routers from ``endpoints``.
"""
