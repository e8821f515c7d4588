"""
Version 1 of the API.

The feed routes are mounted without a version prefix by default
(``/feed``, ``/post``) to keep the public paths stable; set
``API_PREFIX`` to serve them elsewhere.
"""
