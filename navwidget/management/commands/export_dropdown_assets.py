"""
Management command to write the dropdown stylesheet and script to disk.

The files land in ``STATIC_ROOT/navwidget`` by default so WhiteNoise can
serve them alongside the rest of the static files.
"""

from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from navwidget.widget import CSS, JS

ASSETS = {
    "dropdown.css": CSS,
    "dropdown.js": JS,
}


class Command(BaseCommand):
    help = "Write dropdown.css and dropdown.js for serving as static files"

    def add_arguments(self, parser):
        parser.add_argument(
            "--output-dir",
            help="Directory to write the assets to (default: STATIC_ROOT/navwidget)",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show what would be written without touching the filesystem",
        )

    def handle(self, *args, **options):
        output_dir = options["output_dir"]
        if output_dir:
            output_dir = Path(output_dir)
        else:
            output_dir = Path(settings.STATIC_ROOT) / "navwidget"

        dry_run = options["dry_run"]
        if dry_run:
            self.stdout.write(self.style.WARNING("DRY RUN MODE - No files will be written"))
        else:
            try:
                output_dir.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise CommandError(f"Cannot create {output_dir}: {exc}") from exc

        for filename, content in ASSETS.items():
            path = output_dir / filename
            if not dry_run:
                path.write_text(content, encoding="utf-8")
            self.stdout.write(f"{'Would write' if dry_run else 'Wrote'} {path}")

        self.stdout.write(self.style.SUCCESS(f"{len(ASSETS)} asset(s) exported"))
