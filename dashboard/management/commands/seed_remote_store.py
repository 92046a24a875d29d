"""
Management command to push a demo data set to the remote store.
"""
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone
from datetime import timedelta
import random

from dashboard.entities import SHEET_NAMES, Appointment, Department, Doctor, Patient
from dashboard.exceptions import RemoteStoreError
from dashboard.state import build_state

FIRST_NAMES = ['John', 'Mary', 'Ahmed', 'Li', 'Sofia', 'Carlos', 'Aisha', 'Tom', 'Nina', 'Ravi']
LAST_NAMES = ['Smith', 'Johnson', 'Khan', 'Wang', 'Garcia', 'Lopez', 'Bello', 'Brown', 'Petrova', 'Patel']
BLOOD_GROUPS = ['A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-']
PATIENT_STATUSES = ['New Patient', 'Admitted', 'Under Treatment', 'Discharged']
APPOINTMENT_STATUSES = ['Pending', 'Confirmed', 'Completed', 'Cancelled']
TREATMENTS = ['Consultation', 'Follow-up', 'X-Ray', 'Blood Test', 'Vaccination', 'Physiotherapy']


class Command(BaseCommand):
    help = 'Push demo departments, doctors, patients and appointments to the remote store'

    def add_arguments(self, parser):
        parser.add_argument('--patients', type=int, default=25)
        parser.add_argument('--appointments', type=int, default=40)
        parser.add_argument('--seed', type=int, default=None)

    def handle(self, *args, **options):
        state = build_state()
        if not state.config.is_configured:
            raise CommandError('Remote store not configured (set REMOTE_STORE_URL)')
        rng = random.Random(options['seed'])

        departments = self.create_departments()
        doctors = self.create_doctors(departments)
        patients = self.create_patients(rng, options['patients'])
        appointments = self.create_appointments(rng, options['appointments'], patients, doctors)

        failed = 0
        for name, items in (('departments', departments), ('doctors', doctors),
                            ('patients', patients), ('appointments', appointments)):
            for item in items:
                try:
                    ok = state.client.save(SHEET_NAMES[name], 'add', item.to_record())
                except RemoteStoreError as e:
                    self.stderr.write(self.style.WARNING(f"{SHEET_NAMES[name]}: {e}"))
                    ok = False
                failed += 0 if ok else 1
            self.stdout.write(f"{name}: {len(items)}")

        if failed:
            raise CommandError(f'{failed} record(s) were not accepted by the remote store')
        self.stdout.write(self.style.SUCCESS('Demo data pushed to the remote store.'))

    def create_departments(self):
        return [
            Department(name='Cardiology', description='Heart and blood vessel care', icon='fa-heartbeat', total_doctors=2),
            Department(name='Neurology', description='Brain and nervous system', icon='fa-brain', total_doctors=1),
            Department(name='Orthopedics', description='Bones, joints and muscles', icon='fa-bone', total_doctors=1),
            Department(name='Pediatrics', description='Care for infants and children', icon='fa-baby', total_doctors=1),
        ]

    def create_doctors(self, departments):
        names = ['Dr. Sarah Wilson', 'Dr. James Carter', 'Dr. Emily Chen', 'Dr. Omar Haddad', 'Dr. Grace Kim']
        specialists = {
            'Cardiology': 'Cardiologist',
            'Neurology': 'Neurologist',
            'Orthopedics': 'Orthopedic Surgeon',
            'Pediatrics': 'Pediatrician',
        }
        # one doctor per seat declared by each department
        dept_cycle = [d.name for d in departments for _ in range(d.total_doctors)]
        return [
            Doctor(doctor_id=i, name=name, department=dept, specialist=specialists[dept],
                   phone=f'+1-555-01{i:02d}', available=i % 2 == 1)
            for i, (name, dept) in enumerate(zip(names, dept_cycle), start=1)
        ]

    def create_patients(self, rng, count):
        return [
            Patient(
                patient_id=i,
                first_name=rng.choice(FIRST_NAMES),
                last_name=rng.choice(LAST_NAMES),
                age=rng.randint(1, 90),
                gender=rng.choice(['M', 'F', 'Other']),
                phone=f'+1-555-2{i:03d}',
                address=f'{rng.randint(1, 999)} Main Street',
                blood_group=rng.choice(BLOOD_GROUPS),
                status=rng.choice(PATIENT_STATUSES),
            )
            for i in range(1, count + 1)
        ]

    def create_appointments(self, rng, count, patients, doctors):
        if not patients or not doctors:
            return []
        today = timezone.localdate()
        return [
            Appointment(
                appt_id=i,
                patient_id=rng.choice(patients).patient_id,
                doctor_id=rng.choice(doctors).doctor_id,
                date=(today + timedelta(days=rng.randint(-7, 14))).isoformat(),
                time=rng.choice(['09:00', '10:00', '11:00', '14:00', '15:00', '16:00']),
                treatment=rng.choice(TREATMENTS),
                status=rng.choice(APPOINTMENT_STATUSES),
            )
            for i in range(1, count + 1)
        ]
