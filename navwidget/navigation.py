"""
Navigation records for the dropdown widget and the menus configured for it.

A dropdown is described by a :class:`NavigationSpec`: a title, used for the
synthesized home link, and an ordered tuple of :class:`NavigationEntry`
links. Callers either build those directly or pass plain mappings shaped like
``{"title": ..., "navItems": [{"href": ..., "text": ...}]}`` and let
:func:`coerce_spec` convert them.

Named menus are read from ``navigation.toml`` (see ``NAVWIDGET_CONFIG_PATH``)::

    [menus.main]
    title = "Home"
    items = [
        { href = "/about", text = "About" },
    ]

Usage::

    from navwidget.navigation import get_menu

    spec = get_menu("main")
"""

import logging
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from django.conf import settings as django_settings

logger = logging.getLogger(__name__)


class NavigationError(ValueError):
    """Raised when a navigation record is malformed or a menu is unknown."""


def _require_text(data, key, owner):
    """Return ``data[key]`` as text; numbers are converted with ``str()``."""
    value = data.get(key)
    if value is None:
        raise NavigationError(f"{owner} is missing required field '{key}'.")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if not isinstance(value, str):
        raise NavigationError(
            f"{owner} field '{key}' must be a string, got {type(value).__name__}."
        )
    return value


def _to_entries(items):
    if items is None:
        return ()
    if isinstance(items, (str, bytes, Mapping)) or not hasattr(items, "__iter__"):
        raise NavigationError(
            f"Navigation spec field 'navItems' must be a list, got {type(items).__name__}."
        )

    entries = []
    for index, item in enumerate(items):
        try:
            entries.append(NavigationEntry.from_dict(item))
        except NavigationError as exc:
            raise NavigationError(f"navItems[{index}]: {exc}") from exc
    return tuple(entries)


@dataclass(frozen=True)
class NavigationEntry:
    """A single link in a dropdown."""
    href: str
    text: str

    def as_dict(self):
        return {"href": self.href, "text": self.text}

    @classmethod
    def from_dict(cls, data):
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise NavigationError(
                f"Navigation entry must be a mapping, got {type(data).__name__}."
            )
        return cls(
            href=_require_text(data, "href", "Navigation entry"),
            text=_require_text(data, "text", "Navigation entry"),
        )


@dataclass(frozen=True)
class NavigationSpec:
    """A dropdown: the home link title plus its ordered links."""
    title: str
    nav_items: tuple = field(default_factory=tuple)

    def __post_init__(self):
        # nav_items is always a tuple of NavigationEntry, however it was given
        object.__setattr__(self, "nav_items", _to_entries(self.nav_items))

    def as_dict(self):
        return {
            "title": self.title,
            "navItems": [item.as_dict() for item in self.nav_items],
        }

    @classmethod
    def from_dict(cls, data):
        """
        Build a spec from a plain mapping.

        Both ``navItems`` and ``nav_items`` are accepted for the link list;
        when neither is present the dropdown has no links besides home.
        """
        if not isinstance(data, Mapping):
            raise NavigationError(
                f"Navigation spec must be a mapping, got {type(data).__name__}."
            )
        title = _require_text(data, "title", "Navigation spec")

        items = data.get("navItems")
        if items is None:
            items = data.get("nav_items")
        return cls(title=title, nav_items=items)


def coerce_spec(data):
    """Return *data* as a :class:`NavigationSpec`, converting mappings."""
    if isinstance(data, NavigationSpec):
        return data
    return NavigationSpec.from_dict(data)


# ---------------------------------------------------------------------------
# Configured menus
# ---------------------------------------------------------------------------

DEFAULT_MENU_NAME = "main"

_FALLBACK_MENUS = {
    DEFAULT_MENU_NAME: NavigationSpec(title="Home"),
}


def _config_path() -> Path:
    configured = getattr(django_settings, "NAVWIDGET_CONFIG_PATH", None)
    if configured:
        return Path(configured)
    return Path(django_settings.BASE_DIR) / "navigation.toml"


def load_config() -> dict:
    """Read and parse the navigation config file.

    The file is read on every call so edits take effect without restarting
    the server. A missing or unparsable file yields an empty dict.
    """
    path = _config_path()

    if not path.exists():
        logger.debug("Navigation config not found at %s, using built-in menus.", path)
        return {}

    try:
        with open(path, "rb") as fh:
            config = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError):
        logger.exception("Failed to read %s, using built-in menus.", path)
        return {}

    logger.debug("Loaded navigation config from %s", path)
    return config


def get_menus() -> dict:
    """Return every configured menu as ``{name: NavigationSpec}``.

    Malformed menus are logged and skipped. When nothing usable is
    configured the built-in ``main`` menu is returned.
    """
    section = load_config().get("menus", {})
    if not isinstance(section, Mapping):
        logger.warning("Ignoring [menus] in navigation config: expected a table.")
        section = {}

    menus = {}
    for name, menu in section.items():
        try:
            if not isinstance(menu, Mapping):
                raise NavigationError(f"menu must be a table, got {type(menu).__name__}.")
            menus[name] = NavigationSpec.from_dict(
                {"title": menu.get("title"), "navItems": menu.get("items", [])}
            )
        except NavigationError:
            logger.exception("Skipping malformed menu '%s' in navigation config.", name)

    return menus or dict(_FALLBACK_MENUS)


def get_menu(name):
    """Return the configured menu called *name*."""
    menus = get_menus()
    try:
        return menus[name]
    except KeyError:
        raise NavigationError(f"Unknown navigation menu '{name}'.") from None


__all__ = [
    "DEFAULT_MENU_NAME",
    "NavigationEntry",
    "NavigationError",
    "NavigationSpec",
    "coerce_spec",
    "get_menu",
    "get_menus",
    "load_config",
]
