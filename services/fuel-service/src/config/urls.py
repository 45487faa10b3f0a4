"""
Fuel Service URL Configuration
"""

from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView

from shared.common.health import get_health_urlpatterns


urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/v1/fuel/', include('apps.api.urls', namespace='api')),
]

urlpatterns += get_health_urlpatterns()
