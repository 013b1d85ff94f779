from rest_framework.negotiation import DefaultContentNegotiation
from rest_framework.parsers import JSONParser
from rest_framework.renderers import JSONRenderer


LINE_ITEM_MEDIA_TYPE = 'application/vnd.ims.lis.v2.lineitem+json'
LINE_ITEM_CONTAINER_MEDIA_TYPE = 'application/vnd.ims.lis.v2.lineitemcontainer+json'


class LineItemRenderer(JSONRenderer):
    media_type = LINE_ITEM_MEDIA_TYPE
    format = 'lineitem'


class LineItemContainerRenderer(JSONRenderer):
    media_type = LINE_ITEM_CONTAINER_MEDIA_TYPE
    format = 'lineitemcontainer'


class LineItemParser(JSONParser):
    media_type = LINE_ITEM_MEDIA_TYPE


class LineItemContentNegotiation(DefaultContentNegotiation):
    """Responses always use the view's line item media type, whatever the client accepts."""

    def select_renderer(self, request, renderers, format_suffix=None):
        renderer = renderers[0]
        return renderer, renderer.media_type
