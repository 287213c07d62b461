import re
from functools import wraps

from django.conf import settings
from django.http import Http404
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse
from django.utils import translation

from .models import Campaign

SUBDOMAIN_RE = re.compile(r"^[\w-]+$")


def campaign_slug_from_host(host):
    """Return the campaign slug of ``<slug>.<LOBBY_DOMAIN>``, or None."""
    host = host.split(":")[0].lower()
    suffix = "." + settings.LOBBY_DOMAIN.lower()
    if not host.endswith(suffix):
        return None
    slug = host[: -len(suffix)]
    if not SUBDOMAIN_RE.match(slug):
        return None
    return slug


def campaign_view(view):
    """Resolve the campaign from the host subdomain and pass it to ``view``."""
    @wraps(view)
    def wrapper(request, *args, **kwargs):
        slug = campaign_slug_from_host(request.get_host())
        if slug is None:
            raise Http404("No campaign for this host")
        campaign = get_object_or_404(Campaign, slug=slug, is_active=True)
        request.campaign = campaign
        return view(request, campaign, *args, **kwargs)
    return wrapper


def supported_locales():
    return [code for code, _name in settings.LANGUAGES]


def request_locale(request, url_locale=""):
    if url_locale in supported_locales():
        return url_locale
    return translation.get_language_from_request(request)


def localized_url(route_name, locale, **kwargs):
    if locale:
        kwargs["locale"] = locale
    return reverse(route_name, kwargs=kwargs)


def localized(route_name):
    """Redirect GET requests whose URL locale differs from the request locale.

    The redirect targets ``route_name`` with the same route parameters and
    query string, only the locale changes. Otherwise the view runs with the
    locale activated and ``request.LANGUAGE_CODE`` set.
    """
    def decorator(view):
        @wraps(view)
        def wrapper(request, campaign, *args, locale="", **kwargs):
            current = request_locale(request, locale)
            if request.method == "GET" and current != locale:
                url = localized_url(route_name, current, **kwargs)
                if request.GET:
                    url = f"{url}?{request.GET.urlencode()}"
                return redirect(url)
            request.LANGUAGE_CODE = current
            with translation.override(current):
                return view(request, campaign, *args, **kwargs)
        return wrapper
    return decorator
