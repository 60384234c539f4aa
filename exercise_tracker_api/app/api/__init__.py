"""
API package containing the HTTP routes.

``router`` bundles the JSON endpoints served under ``/api``; the
``endpoints`` subpackage holds one module per group of routes.
"""
