from django.urls import path
from . import views

app_name = "visits"

urlpatterns = [
    path("upload/", views.upload_visit, name="upload"),
    path("<int:visit_id>/download/", views.download_visit, name="download"),
    path("<int:visit_id>/delete/", views.delete_visit, name="delete"),
    path("<int:visit_id>/translate/", views.translate_visit, name="translate"),
    path("<int:visit_id>/toggle/", views.toggle_visit_translation, name="toggle"),
]
