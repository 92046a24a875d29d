from rest_framework import serializers

from dashboard.serializers.patient import clean_text


class AppointmentCreateSerializer(serializers.Serializer):
    # selections may arrive empty; the form handler reports that as a warning
    patient_id = serializers.CharField(max_length=32, required=False, allow_blank=True)
    doctor_id = serializers.CharField(max_length=32, required=False, allow_blank=True)
    date = serializers.DateField()
    time = serializers.CharField(max_length=16)
    treatment = serializers.CharField(max_length=128)
    notes = serializers.CharField(max_length=2000, required=False, allow_blank=True)

    def validate_treatment(self, v):
        return clean_text(v)

    def validate_notes(self, v):
        return clean_text(v)

    def validate(self, attrs):
        attrs['date'] = attrs['date'].isoformat()
        return attrs


class AppointmentListQuerySerializer(serializers.Serializer):
    q = serializers.CharField(max_length=64, required=False, allow_blank=True)
    status = serializers.CharField(max_length=64, required=False, allow_blank=True)
    doctorId = serializers.CharField(max_length=32, required=False, allow_blank=True)
    page = serializers.IntegerField(required=False, min_value=1)
