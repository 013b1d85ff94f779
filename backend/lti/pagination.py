from django.conf import settings
from rest_framework.pagination import LimitOffsetPagination
from rest_framework.response import Response
from rest_framework.utils.urls import remove_query_param


class LinkHeaderPagination(LimitOffsetPagination):
    """
    limit/offset pagination that keeps the body a bare JSON array and
    advertises neighbouring pages in a Link header, as LTI containers do.
    """

    @property
    def default_limit(self):
        return getattr(settings, 'LTI_PAGE_SIZE', 50)

    @property
    def max_limit(self):
        return getattr(settings, 'LTI_MAX_PAGE_SIZE', 1000)

    def get_first_link(self):
        if self.offset <= 0:
            return None
        return remove_query_param(self.request.build_absolute_uri(), self.offset_query_param)

    def get_paginated_response(self, data):
        links = []
        for rel, url in (('next', self.get_next_link()),
                         ('prev', self.get_previous_link()),
                         ('first', self.get_first_link())):
            if url:
                links.append(f'<{url}>; rel="{rel}"')
        headers = {'Link': ', '.join(links)} if links else None
        return Response(data, headers=headers)
