from django.urls import path, include
from invoices import health

handler404 = "invoices.views.custom_404_view"
handler500 = "invoices.views.custom_500_view"

urlpatterns = [
    path("health/", health.health_check, name="health_check"),
    path("health/ready/", health.readiness_check, name="readiness_check"),
    path("health/live/", health.liveness_check, name="liveness_check"),
    path("", include("invoices.urls", namespace="invoices")),
]
