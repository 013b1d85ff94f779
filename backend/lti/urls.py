from django.urls import path
from .views import LineItemViewSet

line_item_list = LineItemViewSet.as_view({'get': 'list', 'post': 'create'})
line_item_detail = LineItemViewSet.as_view({
    'get': 'retrieve',
    'put': 'update',
    'patch': 'partial_update',
    'delete': 'destroy',
})

urlpatterns = [
    path('courses/<uuid:course_id>/line_items', line_item_list, name='line-item-list'),
    path('courses/<uuid:course_id>/line_items/<uuid:pk>', line_item_detail, name='line-item-detail'),
]
