"""node-starter: scaffold a new Node.js project from a template repository.

Clones the template, installs its dependencies, and optionally reinitializes
git and opens the result in an editor.
"""

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = ["__version__", "__license__"]
