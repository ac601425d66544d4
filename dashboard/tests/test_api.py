"""
Integration tests for the dashboard HTTP API.

These tests exercise the read-only endpoints end to end through DRF's
APIClient: patient listings for each selector, the count summary,
billing settings and the JSON error contract.
"""
from datetime import date, timedelta
from unittest import mock

from django.db import OperationalError
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from ..models import BillingSettings, Patient
from .factories import encounter_on, make_patient, treatment_on, utc


class DashboardAPITests(APITestCase):
    def setUp(self) -> None:
        """A has no activity, B was seen today, C yesterday; registered A, B, C."""
        self.today = timezone.localdate()
        self.yesterday = self.today - timedelta(days=1)
        self.a = make_patient('A', utc(date(2024, 1, 1)), first_name='Alice', last_name='Okello', age=34,
                              gender='F', village='Kisoro')
        self.b = make_patient('B', utc(date(2024, 1, 2)), first_name='Brian', last_name='Mwangi')
        self.c = make_patient('C', utc(date(2024, 1, 3)), first_name='Clara', last_name='Achieng')
        encounter_on(self.b, self.today, hour=0)
        treatment_on(self.c, self.yesterday)

    def ids(self, response):
        return [p['patientId'] for p in response.json()]

    def test_list_all_patients(self):
        response = self.client.get('/patients')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.ids(response), ['B', 'C', 'A'])

    def test_listing_record_shape(self):
        data = {p['patientId']: p for p in self.client.get('/patients').json()}
        self.assertEqual(data['A'], {
            'patientId': 'A',
            'firstName': 'Alice',
            'lastName': 'Okello',
            'age': 34,
            'gender': 'F',
            'village': 'Kisoro',
            'lastEncounterDate': None,
            'createdAt': '2024-01-01T10:00:00Z',
            'serviceStatus': {'balance': 0, 'balanceToday': 0},
        })
        self.assertEqual(data['B']['lastEncounterDate'], self.today.isoformat())
        self.assertEqual(data['C']['lastEncounterDate'], self.yesterday.isoformat())

    def test_list_today(self):
        response = self.client.get('/patients', {'today': 'true'})
        self.assertEqual(self.ids(response), ['B'])

    def test_list_on_date(self):
        response = self.client.get('/patients', {'date': self.yesterday.isoformat()})
        self.assertEqual(self.ids(response), ['C'])

    def test_today_wins_over_other_selectors(self):
        response = self.client.get('/patients', {
            'today': 'true', 'date': self.yesterday.isoformat(), 'search': 'Alice',
        })
        self.assertEqual(self.ids(response), ['B'])

    def test_date_wins_over_search(self):
        response = self.client.get('/patients', {'date': self.yesterday.isoformat(), 'search': 'Alice'})
        self.assertEqual(self.ids(response), ['C'])

    def test_search(self):
        response = self.client.get('/patients', {'search': 'okel'})
        self.assertEqual(self.ids(response), ['A'])

    def test_empty_search_returns_everyone(self):
        response = self.client.get('/patients', {'search': ''})
        self.assertEqual(self.ids(response), ['B', 'C', 'A'])

    def test_limit(self):
        response = self.client.get('/patients', {'limit': 1})
        self.assertEqual(self.ids(response), ['B'])
        response = self.client.get('/patients', {'limit': 5000})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.json()), 3)

    def test_invalid_date_is_a_client_error(self):
        response = self.client.get('/patients', {'date': '2024-13-45'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        body = response.json()
        self.assertFalse(body['ok'])
        self.assertEqual(body['error']['code'], 'invalid_argument')

    def test_invalid_limit_is_a_client_error(self):
        for limit in ('0', '-3', 'abc'):
            response = self.client.get('/patients', {'limit': limit})
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, limit)
            self.assertEqual(response.json()['error']['code'], 'invalid_argument')

    def test_api_prefix(self):
        response = self.client.get('/api/patients')
        self.assertEqual(self.ids(response), ['B', 'C', 'A'])

    def test_counts(self):
        response = self.client.get('/patients/counts')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {'today': 1, 'date': 1, 'all': 3})

    def test_counts_for_date(self):
        response = self.client.get('/patients/counts', {'date': '2020-01-01'})
        self.assertEqual(response.json(), {'today': 1, 'date': 0, 'all': 3})
        response = self.client.get('/patients/counts', {'date': self.yesterday.isoformat()})
        self.assertEqual(response.json(), {'today': 1, 'date': 1, 'all': 3})

    def test_counts_invalid_date(self):
        response = self.client.get('/patients/counts', {'date': 'yesterday'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_billing_settings_default(self):
        response = self.client.get('/billing/settings')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {'currency': 'USD', 'requirePrepayment': False, 'consultationFee': 0})

    def test_billing_settings_saved(self):
        BillingSettings.objects.create(currency='UGX', require_prepayment=True, consultation_fee='2500.00')
        response = self.client.get('/billing/settings')
        self.assertEqual(response.json(), {'currency': 'UGX', 'requirePrepayment': True, 'consultationFee': 2500})

    def test_health(self):
        self.assertEqual(self.client.get('/health').json(), {'ok': True})
        self.assertEqual(self.client.get('/health/db').json(), {'ok': True, 'patients': 3})

    def test_unknown_path_is_json_not_found(self):
        response = self.client.get('/nope')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json()['error']['code'], 'not_found')

    def test_writes_are_rejected(self):
        response = self.client.post('/patients', {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)

    def test_data_source_failure_is_a_server_error(self):
        with mock.patch(
            'dashboard.services.events.encounter_events',
            side_effect=OperationalError('canceling statement due to statement timeout'),
        ):
            for path in ('/patients', '/patients/counts'):
                response = self.client.get(path)
                self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE, path)
                body = response.json()
                self.assertEqual(body['error']['code'], 'data_source_error')
                self.assertIn('statement timeout', body['error']['message'])

    def test_unexpected_failure_carries_diagnostic(self):
        with mock.patch('dashboard.views.billing.get_billing_settings', side_effect=RuntimeError('boom')):
            response = self.client.get('/billing/settings')
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.json(), {'ok': False, 'error': {'code': 'server_error', 'message': 'boom'}})

    def test_services(self):
        response = self.client.get('/services')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), [])

    def test_malformed_date_is_ignored_when_today_wins(self):
        response = self.client.get('/patients', {'today': 'true', 'date': 'garbage'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.ids(response), ['B'])

    def test_non_true_today_falls_through(self):
        response = self.client.get('/patients', {'today': 'abc'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.ids(response), ['B', 'C', 'A'])
        response = self.client.get('/patients', {'today': 'false', 'date': self.yesterday.isoformat()})
        self.assertEqual(self.ids(response), ['C'])

    def test_long_search_term_is_accepted(self):
        response = self.client.get('/patients', {'search': 'x' * 200})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), [])

    def test_billing_failure_is_a_server_error_not_the_default(self):
        with mock.patch.object(BillingSettings.objects, 'using', side_effect=OperationalError('connection refused')):
            response = self.client.get('/billing/settings')
        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.json()['error']['code'], 'data_source_error')
        self.assertNotIn('currency', response.json())

    def test_health_db_failure_is_a_server_error(self):
        with mock.patch.object(Patient.objects, 'count', side_effect=OperationalError('connection refused')):
            response = self.client.get('/health/db')
        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.json()['error']['code'], 'data_source_error')
