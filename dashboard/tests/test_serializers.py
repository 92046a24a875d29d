from dashboard.serializers.appointment import AppointmentCreateSerializer
from dashboard.serializers.patient import PatientCreateSerializer, clean_text


def test_clean_text_strips_all_markup():
    assert clean_text('  <b>Nina</b> ') == 'Nina'
    assert clean_text('<a href="https://x.example" title="t">Petrova</a>') == 'Petrova'
    assert clean_text('<strong><i>Dr.</i></strong> Who') == 'Dr. Who'
    assert clean_text(None) == ''


def test_patient_serializer_cleans_names():
    data = PatientCreateSerializer(data={
        'first_name': '<i>Nina</i>', 'last_name': '<em>Petrova</em>', 'gender': 'F', 'age': 34,
        'phone': '555-0009', 'address': '<b>9</b> High St', 'blood_group': 'AB+',
    })
    assert data.is_valid(), data.errors
    assert data.validated_data['first_name'] == 'Nina'
    assert data.validated_data['last_name'] == 'Petrova'
    assert data.validated_data['address'] == '9 High St'


def test_appointment_serializer_cleans_treatment_and_keeps_iso_date():
    data = AppointmentCreateSerializer(data={
        'patient_id': '1', 'doctor_id': '2', 'date': '2026-10-22', 'time': '14:00',
        'treatment': '<abbr>X-Ray</abbr>', 'notes': '<code>fasting</code>',
    })
    assert data.is_valid(), data.errors
    assert data.validated_data['treatment'] == 'X-Ray'
    assert data.validated_data['notes'] == 'fasting'
    assert data.validated_data['date'] == '2026-10-22'
