from rest_framework import status
from courses.models import Course
from lti.models import LineItem
from .base import LineItemAPITestCase


class LineItemDestroyTestMixin:
    def target(self):
        raise NotImplementedError

    def test_deletes_the_line_item(self):
        line_item = self.target()
        self.client.delete(self.detail_url(line_item))
        self.assertFalse(LineItem.objects.filter(pk=line_item.pk).exists())

    def test_responds_with_no_content(self):
        resp = self.client.delete(self.detail_url(self.target()))
        self.assertEqual(resp.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(resp.content, b'')


class CoupledLineItemDestroyTests(LineItemDestroyTestMixin, LineItemAPITestCase):
    def setUp(self):
        super().setUp()
        # Created first, so it is the assignment's default line item
        self.default_line_item = self.create_line_item(tag='some_tag', resource_id='orig-123')

    def target(self):
        return self.create_line_item(tag='some_tag', resource_id='orig-123')

    def test_does_not_allow_destroying_default_line_items(self):
        resp = self.client.delete(self.detail_url(self.default_line_item))
        self.assertEqual(resp.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertIn('message', resp.json()['errors'])
        self.assertTrue(LineItem.objects.filter(pk=self.default_line_item.pk).exists())

    def test_not_found_for_line_item_in_another_course(self):
        other_course = Course.objects.create(account=self.account, name='Other Course')
        line_item = self.target()
        resp = self.client.delete(self.detail_url(line_item, course_id=other_course.id))
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertTrue(LineItem.objects.filter(pk=line_item.pk).exists())


class UncoupledLineItemDestroyTests(LineItemDestroyTestMixin, LineItemAPITestCase):
    def target(self):
        return self.create_line_item(resource_link=None, tag='some_tag', resource_id='orig-123')
