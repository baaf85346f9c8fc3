"""Tests for the export_dropdown_assets management command."""

import tempfile
from io import StringIO
from pathlib import Path

from django.core.management import call_command
from django.test import SimpleTestCase, override_settings

from navwidget.widget import CSS, JS


class ExportDropdownAssetsTests(SimpleTestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.tmp = Path(self._tmp.name)

    def test_writes_assets_to_output_dir(self):
        out = StringIO()
        call_command("export_dropdown_assets", output_dir=str(self.tmp / "assets"), stdout=out)
        self.assertEqual((self.tmp / "assets" / "dropdown.css").read_text(), CSS)
        self.assertEqual((self.tmp / "assets" / "dropdown.js").read_text(), JS)
        self.assertIn("2 asset(s) exported", out.getvalue())

    def test_defaults_to_static_root(self):
        with override_settings(STATIC_ROOT=self.tmp):
            call_command("export_dropdown_assets", stdout=StringIO())
        self.assertTrue((self.tmp / "navwidget" / "dropdown.css").exists())
        self.assertTrue((self.tmp / "navwidget" / "dropdown.js").exists())

    def test_dry_run_writes_nothing(self):
        out = StringIO()
        call_command(
            "export_dropdown_assets",
            output_dir=str(self.tmp / "assets"),
            dry_run=True,
            stdout=out,
        )
        self.assertFalse((self.tmp / "assets").exists())
        self.assertIn("Would write", out.getvalue())
