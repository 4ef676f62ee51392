"""
URL configuration for the Autotask datasource backend.
"""
from django.urls import include, path

urlpatterns = [
    path('api/datasource/', include('datasource.urls')),
]
