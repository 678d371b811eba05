from django.urls import path

from EtaskApp.gradetable import views

app_name = "gradetable"

urlpatterns = [
    path("course/<int:course_id>/", views.course_view, name="course"),
]
