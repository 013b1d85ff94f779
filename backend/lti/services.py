import logging
from django.db import transaction
from rest_framework.exceptions import NotFound
from courses.models import Assignment
from .exceptions import PreconditionFailed, Unauthorized, LINK_MISMATCH_MESSAGE
from .models import LineItem, ResourceLink

logger = logging.getLogger(__name__)

LINE_ITEM_FIELDS = ('score_maximum', 'label', 'resource_id', 'tag', 'start_date_time', 'end_date_time')


class LineItemService:
    """
    Line item operations for one course.

    Creation follows one of two models:

    * declarative: the tool names an existing resource link (ltiLinkId) and
      the new line item joins that link's assignment;
    * uncoupled: no ltiLinkId, so a new assignment is created to back the
      line item.

    developer_key is the requesting tool; a declarative create may only
    target resource links that tool placed, or links with no tool.
    """

    def __init__(self, course, developer_key=None):
        self.course = course
        self.developer_key = developer_key

    def create(self, data):
        data = dict(data)
        lti_link_id = data.pop('lti_link_id', None)
        fields = {name: data[name] for name in LINE_ITEM_FIELDS if name in data}

        with transaction.atomic():
            if lti_link_id:
                resource_link, assignment = self._resolve_resource_link(lti_link_id)
            else:
                resource_link = None
                assignment = Assignment.objects.create(
                    course=self.course,
                    name=fields['label'],
                    points_possible=fields['score_maximum'],
                    submission_types='none',
                )
            line_item = LineItem.objects.create(
                assignment=assignment,
                resource_link=resource_link,
                **fields
            )

        logger.info(
            'Created line item %s for assignment %s in course %s (%s)',
            line_item.id, assignment.id, self.course.id,
            'declarative' if resource_link else 'uncoupled')
        return line_item

    def update(self, line_item, data):
        data = dict(data)
        lti_link_id = data.pop('lti_link_id', None)
        if lti_link_id is not None and lti_link_id != line_item.lti_link_id:
            logger.info('Rejected update of line item %s: ltiLinkId %s does not match', line_item.id, lti_link_id)
            raise PreconditionFailed(LINK_MISMATCH_MESSAGE)

        with transaction.atomic():
            changed = []
            for name in LINE_ITEM_FIELDS:
                if name in data:
                    setattr(line_item, name, data[name])
                    changed.append(name)
            if changed:
                line_item.save(update_fields=changed)

            if 'label' in data and line_item.owns_assignment_name():
                assignment = line_item.assignment
                if assignment.name != line_item.label:
                    assignment.name = line_item.label
                    assignment.save(update_fields=['name'])
                    logger.info('Renamed assignment %s after line item %s', assignment.id, line_item.id)

        if changed:
            logger.info('Updated line item %s: %s', line_item.id, ', '.join(changed))
        return line_item

    def destroy(self, line_item):
        if line_item.is_default():
            logger.info('Refused to delete default line item %s', line_item.id)
            raise Unauthorized('The default line item of an assignment cannot be deleted.')
        line_item_id = line_item.id
        line_item.delete()
        logger.info('Deleted line item %s', line_item_id)

    def _resolve_resource_link(self, lti_link_id):
        resource_link = ResourceLink.objects.filter(resource_link_id=lti_link_id).first()
        if resource_link is None:
            raise NotFound('No resource link matches the specified ltiLinkId.')

        tool = resource_link.context_external_tool
        if tool is not None and self.developer_key is not None and tool.developer_key_id != self.developer_key.id:
            logger.info('Rejected line item for resource link %s placed by another tool', resource_link.id)
            raise Unauthorized('The tool is not associated with the requested resource link.')

        default = resource_link.default_line_item()
        if default is None:
            raise PreconditionFailed('The specified resource link has no line items.')

        assignment = default.assignment
        if assignment.course_id != self.course.id:
            raise NotFound('No resource link matches the specified ltiLinkId.')
        return resource_link, assignment
