"""
Management command to populate the database with demo dashboard data.
"""
from datetime import timedelta
from decimal import Decimal
import random

from django.core.management.base import BaseCommand
from django.utils import timezone

from dashboard.models import BillingSettings, Encounter, Patient, Service, Treatment


class Command(BaseCommand):
    help = 'Populate database with demo patients, activity, billing settings and services'

    def add_arguments(self, parser):
        parser.add_argument('--patients', type=int, default=20)
        parser.add_argument('--days', type=int, default=14, help='spread activity over this many past days')
        parser.add_argument('--seed', type=int, default=None)

    def handle(self, *args, **options):
        rng = random.Random(options['seed'])
        self.stdout.write('Creating demo data...')

        patients = self.create_patients(rng, options['patients'])
        self.create_activity(rng, patients, options['days'])
        self.create_billing_settings()
        self.create_services()

        self.stdout.write(self.style.SUCCESS('Demo data created.'))

    def create_patients(self, rng, count):
        first_names = ['Amina', 'John', 'Grace', 'Peter', 'Fatuma', 'Joseph', 'Mary', 'Daniel']
        last_names = ['Okello', 'Mwangi', 'Achieng', 'Kamau', 'Nabirye', 'Otieno']
        villages = ['Kisoro', 'Bweyale', 'Nakaseke', 'Kagadi']
        now = timezone.now()

        patients = []
        for i in range(1, count + 1):
            patient, created = Patient.objects.get_or_create(
                patient_id=f'P{i:04d}',
                defaults={
                    'first_name': rng.choice(first_names),
                    'last_name': rng.choice(last_names),
                    'age': rng.randint(1, 90),
                    'gender': rng.choice(['M', 'F']),
                    'village': rng.choice(villages),
                    'created_at': now - timedelta(days=rng.randint(30, 365)),
                },
            )
            patients.append(patient)
            if created:
                self.stdout.write(f'Created patient: {patient}')
        return patients

    def create_activity(self, rng, patients, days):
        now = timezone.now()
        encounters = treatments = 0
        for patient in patients:
            # Some patients stay without any activity
            if rng.random() < 0.2:
                continue
            for _ in range(rng.randint(1, 3)):
                Encounter.objects.create(patient=patient, created_at=now - timedelta(days=rng.randint(0, days)))
                encounters += 1
            if rng.random() < 0.5:
                Treatment.objects.create(
                    patient=patient, visit_date=timezone.localdate() - timedelta(days=rng.randint(0, days))
                )
                treatments += 1
        self.stdout.write(f'Created {encounters} encounters and {treatments} treatments')

    def create_billing_settings(self):
        if BillingSettings.objects.exists():
            return
        BillingSettings.objects.create(currency='USD', require_prepayment=False, consultation_fee=Decimal('5.00'))
        self.stdout.write('Created billing settings')

    def create_services(self):
        services = [
            ('CONS', 'Consultation', Decimal('5.00'), 'clinical'),
            ('LAB-MAL', 'Malaria test', Decimal('3.50'), 'laboratory'),
            ('XR-CH', 'Chest X-ray', Decimal('20.00'), 'imaging'),
            ('US-ABD', 'Abdominal ultrasound', Decimal('25.00'), 'imaging'),
        ]
        for code, name, price, category in services:
            Service.objects.get_or_create(code=code, defaults={'name': name, 'price': price, 'category': category})
