from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/lti/', include(('lti.urls', 'lti'), namespace='lti')),
]
