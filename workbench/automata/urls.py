from django.urls import path
from . import views

urlpatterns = [
    path("compile", views.compile_api, name="api-compile"),
    path("compile.dot", views.dot_api, name="api-compile-dot"),
]
