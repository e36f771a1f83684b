"""
Book Reviews API - catalog browsing and per-user book reviews.
"""

__version__ = "1.0.0"
