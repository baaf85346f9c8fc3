"""
Collapsible dropdown navigation widget.

Three independent exports make up the widget:

* ``CSS``: the stylesheet fragment,
* ``JS``: the client-side script that toggles a dropdown open and closed,
* ``render()``: HTML for one dropdown built from a ``NavigationSpec``.

They only share the class and attribute names defined below. ``render`` emits
the closed state; flipping it is left to ``JS`` running in the browser.

Every interpolated value goes through ``format_html`` and is escaped, unless
the caller passes a string already marked safe.
"""

from django.utils.html import format_html
from django.utils.safestring import mark_safe

from .navigation import NavigationEntry, coerce_spec

CONTAINER_CLASS = "my-dropdown"
ITEMS_CLASS = "items"
TOGGLE_ATTR = "data-toggle"
STATE_ATTR = "data-open"
STATE_OPEN = "true"
STATE_CLOSED = "false"
ROOT_HREF = "/"
TOGGLE_LABEL = "Toggle"

# ``data-open`` is exposed to scripts as ``el.dataset.open``
_STATE_DATASET_KEY = STATE_ATTR.removeprefix("data-")

CSS = f"""
.{CONTAINER_CLASS} {{
  border: 1px solid black;
  padding: 0.5em;
}}

.{CONTAINER_CLASS}[{STATE_ATTR}="{STATE_CLOSED}"] .{ITEMS_CLASS} {{
  display: none;
}}
"""

JS = f"""Array.from(document.querySelectorAll(".{CONTAINER_CLASS}")).forEach(initDropdown);

function toggleNav(el) {{
  return () => {{
    if (el.dataset.{_STATE_DATASET_KEY} === "{STATE_CLOSED}") {{
      el.dataset.{_STATE_DATASET_KEY} = "{STATE_OPEN}";
    }} else {{
      el.dataset.{_STATE_DATASET_KEY} = "{STATE_CLOSED}";
    }}
  }};
}}

function initDropdown(el) {{
  const button = el.querySelector("[{TOGGLE_ATTR}]");
  if (!button) return;

  button.addEventListener("click", toggleNav(el));
}}
"""

_WIDGET_HTML = """<div class="{container_class}" {state_attr}="{state}">
  <button class="button" {toggle_attr}>{toggle_label}</button>
  <ul class="{items_class}">
    {items}
  </ul>
</div>"""


def nav_item(entry):
    """Render one entry as a list item wrapping a link."""
    return format_html('<li><a href="{}">{}</a></li>', entry.href, entry.text)


def render(data):
    """
    Return the HTML for a closed dropdown.

    *data* is a ``NavigationSpec`` or a mapping accepted by
    ``NavigationSpec.from_dict``. The list always starts with a link to ``/``
    labelled with the spec's title, followed by the spec's entries in order.
    """
    spec = coerce_spec(data)
    entries = (NavigationEntry(href=ROOT_HREF, text=spec.title), *spec.nav_items)
    items = mark_safe("\n    ".join(nav_item(entry) for entry in entries))
    return format_html(
        _WIDGET_HTML,
        container_class=CONTAINER_CLASS,
        state_attr=mark_safe(STATE_ATTR),
        state=STATE_CLOSED,
        toggle_attr=mark_safe(TOGGLE_ATTR),
        toggle_label=TOGGLE_LABEL,
        items_class=ITEMS_CLASS,
        items=items,
    )


html = render


__all__ = [
    "CONTAINER_CLASS",
    "CSS",
    "ITEMS_CLASS",
    "JS",
    "ROOT_HREF",
    "STATE_ATTR",
    "STATE_CLOSED",
    "STATE_OPEN",
    "TOGGLE_ATTR",
    "html",
    "nav_item",
    "render",
]
