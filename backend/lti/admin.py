from django.contrib import admin
from .models import DeveloperKey, ContextExternalTool, ResourceLink, LineItem, RevokedToken


@admin.register(DeveloperKey)
class DeveloperKeyAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'client_id', 'active', 'created_at')
    search_fields = ('name', 'client_id')


@admin.register(ContextExternalTool)
class ContextExternalToolAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'developer_key', 'course', 'account', 'workflow_state')
    list_filter = ('workflow_state',)


@admin.register(ResourceLink)
class ResourceLinkAdmin(admin.ModelAdmin):
    list_display = ('id', 'resource_link_id', 'context_external_tool', 'created_at')
    search_fields = ('resource_link_id',)


@admin.register(LineItem)
class LineItemAdmin(admin.ModelAdmin):
    list_display = ('id', 'label', 'assignment', 'resource_link', 'score_maximum', 'tag', 'created_at')
    search_fields = ('label', 'resource_id', 'tag')
    list_select_related = ('assignment', 'resource_link')


@admin.register(RevokedToken)
class RevokedTokenAdmin(admin.ModelAdmin):
    list_display = ('jti', 'revoked_at')
    readonly_fields = ('jti', 'revoked_at', 'reason')
