"""Read-side serving components.

This module exposes the latest-points query used by the presentation API.
It reshapes time-series query results into flat row objects.
"""
