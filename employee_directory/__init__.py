"""
Employee Directory Package.

Web application listing employees. Domain records are projected into
view records and rendered with Jinja2 templates.
"""

__version__ = "1.0.0"
__description__ = "Employee list web application"

# Export main components
from .app import app, create_app
from .config import settings

__all__ = [
    "app",
    "create_app",
    "settings",
    "__version__",
]
