"""
URL configuration for medi project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.1/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('medadmin/', admin.site.urls),
    path('', include('users.urls', namespace='users')),
    path('visits/', include('visits.urls', namespace='visits')),
    path('summary/', include('summary.urls', namespace='summary')),
]
