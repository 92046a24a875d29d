from rest_framework import serializers


class ConnectionTestSerializer(serializers.Serializer):
    url = serializers.CharField(max_length=500, required=False, allow_blank=True)


class ChangeWeekSerializer(serializers.Serializer):
    direction = serializers.IntegerField(min_value=-1, max_value=1)


class GlobalSearchSerializer(serializers.Serializer):
    q = serializers.CharField(max_length=64, required=False, allow_blank=True)
