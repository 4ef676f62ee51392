"""
URL configuration for datasource app.
"""
from django.urls import path
from datasource import views

urlpatterns = [
    path('query', views.queryData, name='datasource-query'),
    path('health', views.checkHealth, name='datasource-health'),
    path('resources/<path:path>', views.callResource, name='datasource-resource'),
    path('metrics', views.metrics, name='datasource-metrics'),
]
