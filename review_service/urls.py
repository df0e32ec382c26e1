"""Root URL configuration for the review reminder service."""

from django.urls import include, path

urlpatterns = [
    path("api/v1/reviews/", include("core.urls")),
]
