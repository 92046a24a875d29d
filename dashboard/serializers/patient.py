import bleach
from rest_framework import serializers


def clean_text(v):
    return bleach.clean((v or '').strip(), tags=set(), attributes={}, strip=True)


class PatientCreateSerializer(serializers.Serializer):
    first_name = serializers.CharField(max_length=64)
    last_name = serializers.CharField(max_length=64)
    gender = serializers.ChoiceField(choices=['M', 'F', 'Other'])
    age = serializers.IntegerField(min_value=0, max_value=150)
    phone = serializers.CharField(max_length=32)
    address = serializers.CharField(max_length=255)
    blood_group = serializers.CharField(max_length=8)

    def validate_first_name(self, v):
        return clean_text(v)

    def validate_last_name(self, v):
        return clean_text(v)

    def validate_phone(self, v):
        return clean_text(v)

    def validate_address(self, v):
        return clean_text(v)


class PatientListQuerySerializer(serializers.Serializer):
    q = serializers.CharField(max_length=64, required=False, allow_blank=True)
    status = serializers.CharField(max_length=64, required=False, allow_blank=True)
    page = serializers.IntegerField(required=False, min_value=1)


class SortSerializer(serializers.Serializer):
    column = serializers.CharField(max_length=64)
