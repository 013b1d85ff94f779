from django.db import models
from django.utils import timezone
import uuid


def generate_lti_context_id():
    return str(uuid.uuid4())


class Account(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    parent = models.ForeignKey(
        'self',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='sub_accounts')
    created_at = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return self.name

    def account_chain(self):
        """Return this account followed by its ancestors, nearest first."""
        chain = []
        account = self
        while account is not None and account not in chain:
            chain.append(account)
            account = account.parent
        return chain


class CourseQuerySet(models.QuerySet):
    def active(self):
        return self.exclude(workflow_state__in=Course.INACTIVE_STATES)


class Course(models.Model):
    WORKFLOW_STATES = [
        ('created', 'Created'),
        ('claimed', 'Claimed'),
        ('available', 'Available'),
        ('completed', 'Completed'),
        ('deleted', 'Deleted'),
    ]
    INACTIVE_STATES = ('completed', 'deleted')

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    account = models.ForeignKey(
        Account,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='courses')
    course_code = models.CharField(max_length=50, blank=True)
    name = models.CharField(max_length=255)
    workflow_state = models.CharField(
        max_length=20, choices=WORKFLOW_STATES, default='available')
    created_at = models.DateTimeField(default=timezone.now)

    objects = CourseQuerySet.as_manager()

    def __str__(self):
        if self.course_code:
            return f"{self.course_code} - {self.name}"
        return self.name

    @property
    def is_concluded(self):
        return self.workflow_state in self.INACTIVE_STATES

    def account_chain(self):
        if self.account is None:
            return []
        return self.account.account_chain()


class Assignment(models.Model):
    SUBMISSION_TYPES = [
        ('none', 'No Submission'),
        ('external_tool', 'External Tool'),
        ('online_upload', 'File Upload'),
        ('online_text_entry', 'Text Entry'),
        ('on_paper', 'On Paper'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    course = models.ForeignKey(
        Course,
        on_delete=models.CASCADE,
        related_name='assignments')
    name = models.CharField(max_length=255)
    points_possible = models.FloatField(null=True, blank=True)
    submission_types = models.CharField(
        max_length=50, choices=SUBMISSION_TYPES, default='none')

    # Opaque identifier shared with LTI tools; tools use it as the ltiLinkId
    # of the assignment's resource link.
    lti_context_id = models.CharField(
        max_length=255, unique=True, default=generate_lti_context_id)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['created_at']

    def __str__(self):
        return self.name
