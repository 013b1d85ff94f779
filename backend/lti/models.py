import uuid
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q
from django.utils import timezone
from courses.models import Account, Course, Assignment


LINE_ITEM_SCOPE = 'https://purl.imsglobal.org/spec/lti-ags/scope/lineitem'
LINE_ITEM_READONLY_SCOPE = 'https://purl.imsglobal.org/spec/lti-ags/scope/lineitem.readonly'


def generate_client_id():
    return uuid.uuid4().hex


def generate_resource_link_id():
    return str(uuid.uuid4())


class DeveloperKey(models.Model):
    """Registration of an LTI 1.3 tool: its OAuth client id and granted scopes."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    client_id = models.CharField(max_length=255, unique=True, default=generate_client_id)
    name = models.CharField(max_length=255)
    scopes = models.JSONField(default=list, blank=True)
    active = models.BooleanField(default=True)
    created_at = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return f"{self.name} ({self.client_id})"

    # Lets an authenticated key stand in for request.user in DRF.
    @property
    def is_authenticated(self):
        return True

    @property
    def is_anonymous(self):
        return False

    def grants(self, scope):
        return scope in (self.scopes or [])


class ContextExternalToolQuerySet(models.QuerySet):
    def active(self):
        return self.filter(workflow_state='active')

    def installed_in(self, course):
        """Tools installed in the course itself or anywhere up its account chain."""
        accounts = course.account_chain()
        return self.filter(Q(course=course) | Q(account__in=accounts))


class ContextExternalTool(models.Model):
    """A developer key installed in a course or an account."""
    WORKFLOW_STATES = [
        ('active', 'Active'),
        ('deleted', 'Deleted'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    developer_key = models.ForeignKey(
        DeveloperKey,
        on_delete=models.CASCADE,
        related_name='tools')
    name = models.CharField(max_length=255)
    course = models.ForeignKey(
        Course,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='external_tools')
    account = models.ForeignKey(
        Account,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='external_tools')
    workflow_state = models.CharField(max_length=20, choices=WORKFLOW_STATES, default='active')
    created_at = models.DateTimeField(default=timezone.now)

    objects = ContextExternalToolQuerySet.as_manager()

    def __str__(self):
        return self.name

    def clean(self):
        super().clean()
        if self.course_id is None and self.account_id is None:
            raise ValidationError('A tool must be installed in a course or an account.')


class ResourceLink(models.Model):
    """Placement of an external tool; tools reference it by resource_link_id (ltiLinkId)."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    resource_link_id = models.CharField(
        max_length=255, unique=True, default=generate_resource_link_id)
    context_external_tool = models.ForeignKey(
        ContextExternalTool,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='resource_links')
    created_at = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return self.resource_link_id

    def default_line_item(self):
        return self.line_items.order_by('created_at', 'id').first()


class LineItemQuerySet(models.QuerySet):
    def for_course(self, course):
        return self.filter(assignment__course=course)


class LineItem(models.Model):
    """
    Gradebook column published to LTI tools through Assignment and Grade Services.

    A line item with a resource link is "coupled": the earliest one created for
    an assignment and resource link is the assignment's default line item,
    which mirrors the assignment itself and cannot be deleted by a tool.
    A line item without a resource link is "uncoupled" and owns its
    assignment's name.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    assignment = models.ForeignKey(
        Assignment,
        on_delete=models.CASCADE,
        related_name='line_items')
    resource_link = models.ForeignKey(
        ResourceLink,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='line_items')

    score_maximum = models.FloatField(validators=[MinValueValidator(0)])
    label = models.CharField(max_length=255)
    resource_id = models.CharField(max_length=255, null=True, blank=True)
    tag = models.CharField(max_length=255, null=True, blank=True)
    start_date_time = models.DateTimeField(null=True, blank=True)
    end_date_time = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    objects = LineItemQuerySet.as_manager()

    class Meta:
        ordering = ['created_at', 'id']
        indexes = [models.Index(fields=['assignment', 'resource_link', 'created_at'])]

    def __str__(self):
        return f"{self.label} ({self.assignment})"

    @property
    def lti_link_id(self):
        if self.resource_link is None:
            return None
        return self.resource_link.resource_link_id

    def is_default(self):
        """True for the earliest line item of this assignment and resource link."""
        if self.resource_link_id is None:
            return False
        first = LineItem.objects.filter(
            assignment_id=self.assignment_id,
            resource_link_id=self.resource_link_id,
        ).order_by('created_at', 'id').values_list('id', flat=True).first()
        return first == self.id

    def owns_assignment_name(self):
        return self.resource_link_id is None or self.is_default()


class RevokedToken(models.Model):
    jti = models.CharField(max_length=255, primary_key=True)
    revoked_at = models.DateTimeField(default=timezone.now)
    reason = models.TextField(blank=True)

    def __str__(self):
        return self.jti
