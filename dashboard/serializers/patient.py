from rest_framework import serializers


class PatientListQuerySerializer(serializers.Serializer):
    # today/date stay raw strings: only the selector that wins is interpreted
    today = serializers.CharField(required=False, allow_blank=True)
    date = serializers.CharField(required=False, allow_blank=True)
    search = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    limit = serializers.IntegerField(required=False, allow_null=True)


class PatientCountsQuerySerializer(serializers.Serializer):
    date = serializers.DateField(required=False, allow_null=True, input_formats=['%Y-%m-%d'])
