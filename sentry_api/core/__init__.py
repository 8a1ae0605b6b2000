"""
Core helpers package for the Sentry API client.

This package contains low-level infrastructure helpers: the immutable
client configuration and the URL/header builders used for every call.
Keeping these helpers in a dedicated package makes it easy to swap
implementations or customise behaviour for testing.
"""

__all__ = []
