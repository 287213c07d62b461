from django.urls import path, re_path

from . import api_views, views

# Mounted twice by the project URLconf: once bare and once below a locale
# prefix, so every name here reverses with or without a ``locale`` kwarg.
urlpatterns = [
    path('', views.index, name='campaign_index'),

    # Statements
    path('statements/', views.statements, name='campaign_statements'),
    path('statement/<int:id>/', views.statement, name='campaign_statement'),

    # Lobbying a politician
    re_path(r'^lobby/(?P<slug>[\w.-]+)/$', views.lobby, name='campaign_lobby'),
    re_path(r'^lobby/(?P<slug>[\w.-]+)/confirm/(?P<token>[\w-]+)/$', views.lobby_confirm, name='campaign_lobby_confirm'),
    path('thanks/<int:id>/', views.thanks, name='campaign_thanks'),
    path('confirm/<int:id>/', views.confirm, name='campaign_confirm'),

    # JSON
    path('api/politicians/', api_views.politicians, name='campaign_api_politicians'),
    path('api/statements/', api_views.statements, name='campaign_api_statements'),

    # Regions (keep last, the slug pattern is broad)
    path('<int:region_id>/', views.region_redirect, name='campaign_region_redirect'),
    re_path(r'^(?P<region>\w{2})/$', views.region, name='campaign_region'),
]
