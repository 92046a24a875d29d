import copy

from dashboard.exceptions import RemoteStoreError


def sample_payload():
    return {
        'patients': [
            {'patient_id': 1, 'first_name': 'John', 'last_name': 'Smith', 'age': 10, 'gender': 'M',
             'phone': '555-0001', 'address': '1 Main St', 'blood_group': 'A+', 'status': 'Admitted'},
            {'patient_id': 2, 'first_name': 'Mary', 'last_name': 'Jones', 'age': 45, 'gender': 'F',
             'phone': '555-0002', 'address': '2 Main St', 'blood_group': 'O-', 'status': 'New Patient'},
            {'patient_id': 3, 'first_name': 'Ahmed', 'last_name': 'Khan', 'age': 70, 'gender': 'Other',
             'phone': '555-0003', 'address': '3 Main St', 'blood_group': 'B+', 'status': 'Admitted'},
        ],
        'doctors': [
            {'doctor_id': 1, 'name': 'Dr. Sarah Wilson', 'department': 'Cardiology',
             'specialist': 'Cardiologist', 'phone': '555-1001', 'available': True},
            {'doctor_id': 2, 'name': 'Dr. James Carter', 'department': 'Neurology',
             'specialist': 'Neurologist', 'phone': '555-1002', 'available': False},
        ],
        'appointments': [
            {'appt_id': 1, 'patient_id': 1, 'doctor_id': 1, 'date': '2026-10-19', 'time': '09:00',
             'treatment': 'Consultation', 'status': 'Confirmed', 'notes': ''},
            {'appt_id': 2, 'patient_id': 2, 'doctor_id': 1, 'date': '2026-10-20', 'time': '10:00',
             'treatment': 'X-Ray', 'status': 'Pending', 'notes': ''},
            {'appt_id': 3, 'patient_id': 3, 'doctor_id': 2, 'date': '2026-10-21', 'time': '11:00',
             'treatment': 'Blood Test', 'status': 'Completed', 'notes': ''},
        ],
        'departments': [
            {'name': 'Cardiology', 'description': 'Heart care', 'icon': 'fa-heartbeat', 'total_doctors': 1},
            {'name': 'Neurology', 'description': 'Brain care', 'icon': 'fa-brain', 'total_doctors': 1},
            {'name': 'Orthopedics', 'description': 'Bones', 'icon': 'fa-bone', 'total_doctors': 0},
        ],
    }


class FakeRemoteStore:
    """In-process stand-in for the spreadsheet client."""

    def __init__(self, payload=None, fail_load=False, fail_save=False):
        self.payload = sample_payload() if payload is None else payload
        self.fail_load = fail_load
        self.fail_save = fail_save
        self.loads = 0
        self.saved = []

    def load(self):
        self.loads += 1
        if self.fail_load:
            raise RemoteStoreError('Remote store unreachable')
        return copy.deepcopy(self.payload)

    def fetch_sheet(self, sheet):
        if self.fail_load:
            raise RemoteStoreError('Remote store unreachable')
        return copy.deepcopy(self.payload.get(sheet.lower(), []))

    def save(self, sheet, action, record):
        if self.fail_save:
            raise RemoteStoreError('Remote store unreachable')
        self.saved.append((sheet, action, record))
        return True
