"""
Context processors for navwidget.

Exposes the configured dropdown menus to templates so pages can render them
from a single source of truth.
"""

from navwidget.navigation import get_menus


def navigation(_request):
    """
    Add navigation data to the template context.

    Returns a dictionary with a ``navigation_menus`` key mapping each
    configured menu name to its ``NavigationSpec``.
    """
    return {
        "navigation_menus": get_menus(),
    }
