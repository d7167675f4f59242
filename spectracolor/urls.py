from django.urls import path
from spectracolor import views

app_name = "spectracolor"

urlpatterns = [
    path("options", views.conversion_options, name="options"),
    path("parse", views.parse_spectrum, name="parse"),
    path("convert", views.convert_spectrum, name="convert"),
]
