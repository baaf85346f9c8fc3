"""Views serving the dropdown widget, its stylesheet and its script."""

import json
import logging

from django.http import Http404, HttpResponse, JsonResponse
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from . import widget
from .navigation import NavigationError, coerce_spec, get_menu

logger = logging.getLogger(__name__)


def get_demo_template(request):
    """Return the menus-only partial for HTMX requests, the full page otherwise."""
    if request.htmx:
        return "navwidget/partials/menus.html"
    return "navwidget/demo.html"


@require_GET
def dropdown_css(request):
    return HttpResponse(widget.CSS, content_type="text/css; charset=utf-8")


@require_GET
def dropdown_js(request):
    return HttpResponse(widget.JS, content_type="text/javascript; charset=utf-8")


@require_GET
def menu_fragment(request, name):
    """Return the HTML fragment for the configured menu called ``name``."""
    try:
        spec = get_menu(name)
    except NavigationError as exc:
        raise Http404(str(exc)) from exc
    return HttpResponse(widget.render(spec))


# Rendering reads only the request body and touches no server state.
@csrf_exempt
@require_POST
def render_dropdown(request):
    """Render a dropdown from a JSON body.

    Request body
    ------------
    ``{"title": "Home", "navItems": [{"href": "/about", "text": "About"}]}``

    Malformed JSON or a malformed record → 400 with ``{"error": ...}``.
    """
    try:
        payload = json.loads(request.body or b"null")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.info("Rejected dropdown render request: invalid JSON (%s)", exc)
        return JsonResponse({"error": f"Invalid JSON: {exc}"}, status=400)

    try:
        spec = coerce_spec(payload)
    except NavigationError as exc:
        logger.info("Rejected dropdown render request: %s", exc)
        return JsonResponse({"error": str(exc)}, status=400)

    return HttpResponse(widget.render(spec))


@require_GET
def demo(request):
    """Page assembling the stylesheet, the script and every configured menu."""
    return render(request, get_demo_template(request))
