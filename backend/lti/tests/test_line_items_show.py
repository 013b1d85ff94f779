import uuid
from rest_framework import status
from courses.models import Course, Assignment
from lti.renderers import LINE_ITEM_MEDIA_TYPE
from .base import LineItemAPITestCase


class LineItemShowTests(LineItemAPITestCase):
    def setUp(self):
        super().setUp()
        self.line_item = self.create_line_item(tag='some_tag')

    def test_formats_the_line_item(self):
        resp = self.client.get(self.detail_url(self.line_item))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.json(), {
            'id': self.absolute_id(self.line_item),
            'scoreMaximum': 1.0,
            'label': 'Test Line Item',
            'tag': 'some_tag',
            'ltiLinkId': self.resource_link.resource_link_id,
        })

    def test_omits_lti_link_id_for_uncoupled_line_items(self):
        uncoupled = self.create_line_item(resource_link=None, resource_id='orig-123')
        body = self.client.get(self.detail_url(uncoupled)).json()
        self.assertNotIn('ltiLinkId', body)
        self.assertEqual(body['resourceId'], 'orig-123')

    def test_not_found_if_line_item_is_requested_through_another_course(self):
        other_course = Course.objects.create(account=self.account, name='Other Course')
        resp = self.client.get(self.detail_url(self.line_item, course_id=other_course.id))
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)

    def test_not_found_if_line_item_belongs_to_another_course(self):
        other_course = Course.objects.create(account=self.account, name='Other Course')
        other_assignment = Assignment.objects.create(course=other_course, name='Other')
        other_item = self.create_line_item(assignment=other_assignment)
        resp = self.client.get(self.detail_url(other_item))
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)

    def test_not_found_if_line_item_does_not_exist(self):
        url = self.detail_url(self.line_item).replace(str(self.line_item.id), str(uuid.uuid4()))
        resp = self.client.get(url)
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertIn('message', resp.json()['errors'])

    def test_not_found_if_course_does_not_exist(self):
        resp = self.client.get(self.detail_url(self.line_item, course_id=uuid.uuid4()))
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)

    def test_not_found_if_course_is_deleted(self):
        self.course.workflow_state = 'deleted'
        self.course.save()
        resp = self.client.get(self.detail_url(self.line_item))
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)

    def test_responds_with_line_item_media_type(self):
        resp = self.client.get(self.detail_url(self.line_item))
        self.assertIn(LINE_ITEM_MEDIA_TYPE, resp['Content-Type'])

    def test_line_item_media_type_regardless_of_accept_header(self):
        resp = self.client.get(self.detail_url(self.line_item), HTTP_ACCEPT='application/json')
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertIn(LINE_ITEM_MEDIA_TYPE, resp['Content-Type'])
        self.assertEqual(resp.json()['id'], self.absolute_id(self.line_item))

    def test_errors_use_line_item_media_type_regardless_of_accept_header(self):
        resp = self.client.get(
            self.detail_url(self.line_item, course_id=uuid.uuid4()), HTTP_ACCEPT='application/json')
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertIn(LINE_ITEM_MEDIA_TYPE, resp['Content-Type'])
