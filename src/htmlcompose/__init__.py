"""
htmlcompose - HTML include and named-slot composition

Expands <include src="..."> directives with <yield name="..."> slot bindings
into fully composed pages.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
