from rest_framework.permissions import BasePermission, SAFE_METHODS
from .models import ContextExternalTool, LINE_ITEM_SCOPE, LINE_ITEM_READONLY_SCOPE
from .tokens import ToolTokenHelper


class ToolInstalledInCourse(BasePermission):
    """The authenticated tool must be installed in the course or its account chain."""
    message = 'The tool is not installed in the requested context.'

    def has_permission(self, request, view):
        # Raises Http404 for a missing or concluded course
        course = view.get_course()
        return ContextExternalTool.objects.active().installed_in(course).filter(
            developer_key=request.user).exists()


class HasLineItemScope(BasePermission):
    message = 'The access token does not grant the required line item scope.'

    def has_permission(self, request, view):
        granted = ToolTokenHelper.scopes(request.auth or {})
        granted &= set(request.user.scopes or [])
        if request.method in SAFE_METHODS:
            return bool(granted & {LINE_ITEM_SCOPE, LINE_ITEM_READONLY_SCOPE})
        return LINE_ITEM_SCOPE in granted
