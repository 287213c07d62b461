"""
URL configuration for lobby_site project.

Campaign pages are served on ``<campaign>.<LOBBY_DOMAIN>``; the host decides
the campaign, the path decides the page. Each campaign route exists both
unprefixed and below a locale prefix, e.g. ``/lobby/x/`` and ``/fr/lobby/x/``.
"""
from django.conf import settings
from django.contrib import admin
from django.urls import include, path, re_path

LOCALE_PATTERN = '|'.join(code for code, _name in settings.LANGUAGES)

urlpatterns = [
    path('admin/', admin.site.urls),
    # Locale prefixed routes first, "/fr/" is a locale and not the region "fr".
    re_path(rf'^(?P<locale>{LOCALE_PATTERN})/', include('lobby.urls')),
    path('', include('lobby.urls')),
]
