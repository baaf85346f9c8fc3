from django import template
from django.utils.html import format_html
from django.utils.safestring import mark_safe

from navwidget.navigation import get_menu
from navwidget.widget import CSS, JS, render

register = template.Library()


@register.simple_tag
def dropdown_css():
    """Return the dropdown stylesheet wrapped in a ``<style>`` block."""
    return format_html("<style>{}</style>", mark_safe(CSS))


@register.simple_tag
def dropdown_js():
    """Return the dropdown script wrapped in a ``<script>`` block."""
    return format_html("<script>{}</script>", mark_safe(JS))


@register.simple_tag
def dropdown(menu):
    """
    Render a dropdown.

    ``menu`` may be:
      - a NavigationSpec,
      - a dict shaped like ``{"title": ..., "navItems": [...]}``,
      - the name of a menu configured in navigation.toml ("main").
    """
    if isinstance(menu, str):
        menu = get_menu(menu)
    return render(menu)
