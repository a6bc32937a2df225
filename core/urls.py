"""
URL configuration for the exceptional project.

Only the admin site is exposed; entities are managed through it.
"""

from django.contrib import admin
from django.urls import path

urlpatterns = [
    path("admin/", admin.site.urls),
]
