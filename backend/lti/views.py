from django.shortcuts import get_object_or_404
from rest_framework import viewsets, status, exceptions
from rest_framework.parsers import JSONParser, FormParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from courses.models import Course
from .authentication import ToolTokenAuthentication
from .exceptions import Unauthorized, lti_exception_handler
from .models import LineItem
from .pagination import LinkHeaderPagination
from .permissions import ToolInstalledInCourse, HasLineItemScope
from .renderers import (
    LineItemRenderer, LineItemContainerRenderer, LineItemParser, LineItemContentNegotiation,
)
from .serializers import LineItemSerializer
from .services import LineItemService


class LineItemViewSet(viewsets.GenericViewSet):
    """LTI Assignment and Grade Services line item endpoints for a course."""
    serializer_class = LineItemSerializer
    authentication_classes = [ToolTokenAuthentication]
    permission_classes = [IsAuthenticated, ToolInstalledInCourse, HasLineItemScope]
    parser_classes = [LineItemParser, JSONParser, FormParser, MultiPartParser]
    content_negotiation_class = LineItemContentNegotiation
    pagination_class = LinkHeaderPagination

    def get_renderers(self):
        if getattr(self, 'action', None) == 'list':
            return [LineItemContainerRenderer()]
        return [LineItemRenderer()]

    def get_exception_handler(self):
        return lti_exception_handler

    def permission_denied(self, request, message=None, code=None):
        if request.authenticators and not request.successful_authenticator:
            raise exceptions.NotAuthenticated()
        raise Unauthorized(message)

    def get_course(self):
        if not hasattr(self, '_course'):
            self._course = get_object_or_404(Course.objects.active(), pk=self.kwargs['course_id'])
        return self._course

    def get_queryset(self):
        return LineItem.objects.for_course(self.get_course()).select_related(
            'assignment', 'resource_link')

    def filter_line_items(self, queryset):
        params = self.request.query_params
        if params.get('tag'):
            queryset = queryset.filter(tag=params['tag'])
        if params.get('resource_id'):
            queryset = queryset.filter(resource_id=params['resource_id'])
        lti_link_id = params.get('lti_link_id') or params.get('resource_link_id')
        if lti_link_id:
            queryset = queryset.filter(resource_link__resource_link_id=lti_link_id)
        return queryset

    def list(self, request, *args, **kwargs):
        queryset = self.filter_line_items(self.get_queryset())
        page = self.paginate_queryset(queryset)
        serializer = self.get_serializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        line_item = LineItemService(self.get_course(), request.user).create(serializer.validated_data)
        return Response(self.get_serializer(line_item).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, *args, **kwargs):
        return Response(self.get_serializer(self.get_object()).data)

    def update(self, request, *args, **kwargs):
        # PUT is partial as well: tools send only the attributes they change
        line_item = self.get_object()
        serializer = self.get_serializer(line_item, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        line_item = LineItemService(self.get_course(), request.user).update(line_item, serializer.validated_data)
        return Response(self.get_serializer(line_item).data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        LineItemService(self.get_course(), request.user).destroy(self.get_object())
        return Response(status=status.HTTP_204_NO_CONTENT)
