"""
Tests for the dropdown template tags.

Covers:
- dropdown_css / dropdown_js wrap the collaborators without escaping them
- dropdown accepts a NavigationSpec, a mapping or a configured menu name
"""

import tempfile
from pathlib import Path

from django.template import Context, Template
from django.test import SimpleTestCase, override_settings

from navwidget.navigation import NavigationEntry, NavigationError, NavigationSpec
from navwidget.widget import CSS, JS, render


def _render_template(source, **context):
    return Template("{% load dropdown_tags %}" + source).render(Context(context))


class AssetTagTests(SimpleTestCase):
    def test_dropdown_css(self):
        self.assertEqual(_render_template("{% dropdown_css %}"), f"<style>{CSS}</style>")

    def test_dropdown_js(self):
        self.assertEqual(_render_template("{% dropdown_js %}"), f"<script>{JS}</script>")


class DropdownTagTests(SimpleTestCase):
    def test_spec(self):
        spec = NavigationSpec(
            title="Home", nav_items=(NavigationEntry(href="/about", text="About"),)
        )
        self.assertEqual(_render_template("{% dropdown menu %}", menu=spec), render(spec))

    def test_mapping(self):
        menu = {"title": "Home", "navItems": [{"href": "/about", "text": "About"}]}
        output = _render_template("{% dropdown menu %}", menu=menu)
        self.assertIn('<li><a href="/about">About</a></li>', output)

    def test_output_is_not_double_escaped(self):
        output = _render_template("{% dropdown menu %}", menu={"title": "A & B"})
        self.assertIn('<div class="my-dropdown" data-open="false">', output)
        self.assertIn(">A &amp; B</a>", output)

    def test_configured_menu_name(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "navigation.toml"
            path.write_text('[menus.footer]\ntitle = "Start"\n')
            with override_settings(NAVWIDGET_CONFIG_PATH=path):
                output = _render_template('{% dropdown "footer" %}')
        self.assertIn('<li><a href="/">Start</a></li>', output)

    def test_unknown_menu_name_raises(self):
        with tempfile.TemporaryDirectory() as tmp:
            with override_settings(NAVWIDGET_CONFIG_PATH=Path(tmp) / "missing.toml"):
                with self.assertRaises(NavigationError):
                    _render_template('{% dropdown "footer" %}')
