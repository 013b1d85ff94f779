from django.urls import reverse
from rest_framework import serializers


class LineItemSerializer(serializers.Serializer):
    """LTI Assignment and Grade Services representation of a LineItem."""
    id = serializers.SerializerMethodField()
    scoreMaximum = serializers.FloatField(source='score_maximum', min_value=0)
    label = serializers.CharField(max_length=255)
    resourceId = serializers.CharField(
        source='resource_id', max_length=255, required=False, allow_null=True, allow_blank=True)
    tag = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    ltiLinkId = serializers.CharField(source='lti_link_id', max_length=255, required=False)
    startDateTime = serializers.DateTimeField(source='start_date_time', required=False, allow_null=True)
    endDateTime = serializers.DateTimeField(source='end_date_time', required=False, allow_null=True)

    def get_id(self, obj):
        path = reverse('lti:line-item-detail', kwargs={
            'course_id': obj.assignment.course_id,
            'pk': obj.id,
        })
        request = self.context.get('request')
        return request.build_absolute_uri(path) if request else path

    def validate(self, attrs):
        start = attrs.get('start_date_time', getattr(self.instance, 'start_date_time', None))
        end = attrs.get('end_date_time', getattr(self.instance, 'end_date_time', None))
        if start and end and end < start:
            raise serializers.ValidationError({'endDateTime': 'Must not be earlier than startDateTime.'})
        return attrs

    def to_representation(self, instance):
        data = super().to_representation(instance)
        return {key: value for key, value in data.items() if value is not None}
