"""URL configuration for the host enumeration API."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("api/groups/", views.groups_api, name="groups_api"),
    path("api/enumerate/", views.enumerate_api, name="enumerate_api"),
    path("api/validate/", views.validate_api, name="validate_api"),
    path("api/tooltip/", views.tooltip_api, name="tooltip_api"),
]
