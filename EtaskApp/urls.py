from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/v1/", include("EtaskApp.api.urls")),
    path("", include("EtaskApp.gradetable.urls")),
]
