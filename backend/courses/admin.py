from django.contrib import admin
from .models import Account, Course, Assignment


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'parent', 'created_at')
    search_fields = ('name',)


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ('id', 'course_code', 'name', 'account', 'workflow_state')
    list_filter = ('workflow_state',)
    search_fields = ('course_code', 'name')


@admin.register(Assignment)
class AssignmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'course', 'points_possible', 'submission_types')
    readonly_fields = ('lti_context_id',)
    search_fields = ('name', 'lti_context_id')
