"""
mustache-filters - filter application for Mustache-style templates

Binds named transformations (``{{ f(x) }}``, ``{{ f(a,b) }}``) to callables
and composes them with a lazy rendering pipeline.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
