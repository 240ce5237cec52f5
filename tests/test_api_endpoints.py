"""
API tests for the HTTP contracts of check-in, redemption and account endpoints.
"""
import json
from datetime import timedelta
from io import StringIO
from unittest.mock import patch

import pytest
from django.core.management import call_command
from django.db import DatabaseError
from django.test import RequestFactory
from django.utils import timezone
from rest_framework.test import APIClient
from hypothesis.extra.django import TestCase

from apps.common.health_views import BasicHealthCheckView
from apps.common.middleware import ErrorHandlingMiddleware
from apps.points.models import PointsAccount
from apps.points.services import PointsService
from tests.factories import (
    UserFactory, PlaceFactory, RedeemablePlaceFactory, RewardFactory,
    grant_points, point_north_of
)


@pytest.mark.django_db
class TestCheckinAPI(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = UserFactory()
        self.place = PlaceFactory(name='Clock Tower')
        self.client.force_authenticate(user=self.user)

    def test_checkin_created(self):
        response = self.client.post('/api/checkins/', {
            'placeId': self.place.id,
            'coordinates': point_north_of(self.place, 15),
        }, format='json')

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body['msg'], 'Check-in successful! Points awarded.')
        data = body['data']
        self.assertIsInstance(data['checkinId'], int)
        self.assertEqual(data['place'], {'id': self.place.id, 'name': 'Clock Tower', 'distance': 15})
        self.assertEqual(data['points'], {'awarded': 10, 'total': 10})
        self.assertIn('timestamp', data)

    def test_duplicate_checkin_conflict(self):
        payload = {'placeId': self.place.id, 'coordinates': point_north_of(self.place, 15)}
        self.client.post('/api/checkins/', payload, format='json')
        response = self.client.post('/api/checkins/', payload, format='json')

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()['msg'], 'Already checked in at this place today')

    def test_too_far(self):
        response = self.client.post('/api/checkins/', {
            'placeId': self.place.id,
            'coordinates': point_north_of(self.place, 80),
        }, format='json')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['msg'], 'Too far from place. You are 80m away. Must be within 20 meters.')

    def test_unknown_place(self):
        response = self.client.post('/api/checkins/', {'placeId': 999999, 'coordinates': [0, 0]}, format='json')
        self.assertEqual(response.status_code, 404)

    def test_invalid_coordinates(self):
        for coordinates in ([1.0], [200, 10], [10, 95], 'here'):
            response = self.client.post('/api/checkins/', {
                'placeId': self.place.id, 'coordinates': coordinates
            }, format='json')
            self.assertEqual(response.status_code, 400)

    def test_requires_authentication(self):
        response = APIClient().post('/api/checkins/', {}, format='json')
        self.assertEqual(response.status_code, 401)

    def test_history(self):
        self.client.post('/api/checkins/', {
            'placeId': self.place.id, 'coordinates': point_north_of(self.place, 15)
        }, format='json')
        response = self.client.get('/api/checkins/')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()['data']), 1)
        self.assertEqual(response.json()['data'][0]['place']['name'], 'Clock Tower')


@pytest.mark.django_db
class TestRewardAPI(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = UserFactory()
        self.admin = UserFactory(is_staff=True)
        self.reward = RewardFactory(name='Museum Pass', points_cost=30, type='experience')

    def test_redeem_response(self):
        grant_points(self.user, 50)
        self.client.force_authenticate(user=self.user)

        response = self.client.post(f'/api/rewards/{self.reward.id}/redeem/')

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body['msg'], 'Reward redeemed successfully!')
        self.assertEqual(body['data']['reward'], {
            'id': self.reward.id,
            'name': 'Museum Pass',
            'shortDescription': self.reward.short_description,
            'type': 'experience',
            'pointsCost': 30,
        })
        self.assertEqual(body['data']['user'], {'remainingPoints': 20})

        response = self.client.post(f'/api/rewards/{self.reward.id}/redeem/')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['msg'], 'Insufficient points. You need 30 points but have 20.')

    def test_redeem_inactive(self):
        self.client.force_authenticate(user=self.user)
        reward = RewardFactory(is_active=False)
        response = self.client.post(f'/api/rewards/{reward.id}/redeem/')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['msg'], 'Reward is not available')

    def test_list_active_by_cost(self):
        RewardFactory(points_cost=10)
        RewardFactory(points_cost=100, is_active=False)

        response = APIClient().get('/api/rewards/')

        self.assertEqual(response.status_code, 200)
        data = response.json()['data']
        self.assertEqual([r['pointsCost'] for r in data['list']], [10, 30])
        self.assertEqual(data['pagination']['totalItems'], 2)

    def test_list_filter_by_type(self):
        RewardFactory(type='voucher')
        response = APIClient().get('/api/rewards/', {'type': 'experience'})
        self.assertEqual([r['id'] for r in response.json()['data']['list']], [self.reward.id])

    def test_inactive_detail_hidden(self):
        reward = RewardFactory(is_active=False)
        response = APIClient().get(f'/api/rewards/{reward.id}/')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()['msg'], 'Reward not available')

    def test_admin_create_and_list_all(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.post('/api/rewards/', {
            'name': 'Tote Bag',
            'shortDescription': 'Canvas tote',
            'description': 'A sturdy canvas bag',
            'pointsCost': 40,
            'type': 'gift',
            'isActive': False,
            'validUntil': (timezone.now() + timedelta(days=30)).isoformat(),
        }, format='json')
        self.assertEqual(response.status_code, 201)

        response = self.client.get('/api/rewards/admin/all/')
        names = [r['name'] for r in response.json()['data']['list']]
        self.assertIn('Tote Bag', names)

    def test_admin_rejects_zero_cost(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.post('/api/rewards/', {
            'name': 'Nothing', 'shortDescription': 'x', 'description': 'x', 'pointsCost': 0,
        }, format='json')
        self.assertEqual(response.status_code, 400)

    def test_non_admin_cannot_create(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.post('/api/rewards/', {'name': 'x'}, format='json')
        self.assertEqual(response.status_code, 403)

    def test_use_redemption(self):
        grant_points(self.user, 30)
        self.client.force_authenticate(user=self.user)
        self.client.post(f'/api/rewards/{self.reward.id}/redeem/')
        redemption_id = self.user.redeemed_rewards.get().id

        response = self.client.post(f'/api/rewards/redemptions/{redemption_id}/use/')
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()['data']['used'])


@pytest.mark.django_db
class TestPlaceAPI(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = UserFactory()

    def test_redeem_response(self):
        place = RedeemablePlaceFactory(redemption_points_cost=25)
        grant_points(self.user, 5)
        self.client.force_authenticate(user=self.user)

        response = self.client.post(f'/api/places/{place.id}/redeem/')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['data'], {'pointsAwarded': 25, 'totalPoints': 30})

    def test_redeem_not_eligible(self):
        place = PlaceFactory()
        self.client.force_authenticate(user=self.user)
        response = self.client.post(f'/api/places/{place.id}/redeem/')
        self.assertEqual(response.status_code, 400)

    def test_nearby(self):
        place = PlaceFactory(latitude=48.8584, longitude=2.2945)
        PlaceFactory(latitude=-33.8568, longitude=151.2153)

        response = APIClient().get('/api/places/', {'lat': 48.8584, 'lng': 2.2950, 'radius': 500})

        self.assertEqual(response.status_code, 200)
        data = response.json()['data']
        self.assertEqual(data['count'], 1)
        self.assertEqual(data['list'][0]['id'], place.id)
        self.assertEqual(data['list'][0]['location'], {'type': 'Point', 'coordinates': [2.2945, 48.8584]})
        self.assertIn('distance', data['list'][0])

    def test_admin_create_place(self):
        self.client.force_authenticate(user=UserFactory(is_staff=True))
        response = self.client.post('/api/places/', {
            'name': 'Old Bridge',
            'description': 'Stone bridge',
            'location': {'coordinates': [12.5, 41.9]},
            'redemption': {'eligible': True, 'pointsCost': 15},
        }, format='json')
        self.assertEqual(response.status_code, 201)

    def test_admin_list_all_places(self):
        PlaceFactory(name='First')
        second = PlaceFactory(name='Second')
        self.client.force_authenticate(user=UserFactory(is_staff=True))

        response = self.client.get('/api/places/admin/all/', {'limit': 1})

        self.assertEqual(response.status_code, 200)
        data = response.json()['data']
        self.assertEqual([p['id'] for p in data['list']], [second.id])
        self.assertEqual(data['pagination']['totalItems'], 2)
        self.assertTrue(data['pagination']['hasNext'])

    def test_admin_list_requires_admin(self):
        self.client.force_authenticate(user=self.user)
        self.assertEqual(self.client.get('/api/places/admin/all/').status_code, 403)

    def test_bookmark_flow(self):
        place = PlaceFactory()
        self.client.force_authenticate(user=self.user)
        self.assertEqual(self.client.post(f'/api/places/{place.id}/bookmark/').status_code, 200)
        response = self.client.get('/api/places/bookmarks/me/')
        self.assertEqual([p['id'] for p in response.json()['data']], [place.id])


@pytest.mark.django_db
class TestUserAPI(TestCase):

    def setUp(self):
        self.client = APIClient()

    def test_register_and_login(self):
        response = self.client.post('/api/auth/register/', {
            'username': 'walker',
            'email': 'walker@example.com',
            'password': 'secret123',
            'confirm_password': 'secret123',
        }, format='json')
        self.assertEqual(response.status_code, 201)
        self.assertIn('token', response.json()['data'])
        self.assertEqual(response.json()['data']['user']['points'], 0)

        response = self.client.post('/api/auth/login/', {
            'email': 'walker@example.com', 'password': 'secret123'
        }, format='json')
        self.assertEqual(response.status_code, 200)

        token = response.json()['data']['token']
        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
        self.assertEqual(self.client.get('/api/users/profile/').status_code, 200)

    def _login(self, user):
        response = self.client.post('/api/auth/login/', {
            'username': user.username, 'password': 'testpass123'
        }, format='json')
        return response.json()['data']

    def test_logout_blacklists_tokens(self):
        tokens = self._login(UserFactory())
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['token']}")
        self.assertEqual(self.client.get('/api/users/profile/').status_code, 200)

        response = self.client.post('/api/auth/logout/', {'refresh': tokens['refresh']}, format='json')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['msg'], 'Logged out')

        self.assertEqual(self.client.get('/api/users/profile/').status_code, 401)
        self.client.credentials()
        response = self.client.post('/api/auth/token/refresh/', {'refresh': tokens['refresh']}, format='json')
        self.assertEqual(response.status_code, 401)

    def test_logout_rejects_foreign_refresh_token(self):
        mine = self._login(UserFactory())
        theirs = self._login(UserFactory())
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {mine['token']}")

        response = self.client.post('/api/auth/logout/', {'refresh': theirs['refresh']}, format='json')

        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.client.get('/api/users/profile/').status_code, 200)

    def test_logout_requires_authentication(self):
        self.assertEqual(self.client.post('/api/auth/logout/').status_code, 401)

    def test_login_bad_password(self):
        user = UserFactory()
        response = self.client.post('/api/auth/login/', {
            'username': user.username, 'password': 'wrong-password'
        }, format='json')
        self.assertEqual(response.status_code, 401)

    def test_profile_includes_points_and_redemptions(self):
        user = UserFactory()
        grant_points(user, 30)
        reward = RewardFactory(points_cost=10)
        self.client.force_authenticate(user=user)
        self.client.post(f'/api/rewards/{reward.id}/redeem/')

        data = self.client.get('/api/users/profile/').json()['data']
        self.assertEqual(data['points'], 20)
        self.assertEqual(len(data['redeemedRewards']), 1)

    def test_points_balance_and_transactions(self):
        user = UserFactory()
        grant_points(user, 12)
        self.client.force_authenticate(user=user)

        balance = self.client.get('/api/points/balance/').json()['data']
        self.assertEqual(balance['totalPoints'], 12)

        transactions = self.client.get('/api/points/transactions/').json()['data']
        self.assertEqual(transactions['list'][0]['amount'], 12)
        self.assertEqual(transactions['list'][0]['type'], 'adjustment')

    def test_leaderboard_top_three(self):
        for points in (5, 50, 20, 35):
            grant_points(UserFactory(), points)

        response = self.client.get('/api/users/leaderboard/')

        self.assertEqual(response.status_code, 200)
        self.assertEqual([row['points'] for row in response.json()['data']], [50, 35, 20])

    def test_reward_history_self_or_admin(self):
        owner = UserFactory()
        other = UserFactory()
        grant_points(owner, 10)
        grant_points(owner, 5)

        self.client.force_authenticate(user=other)
        response = self.client.get(f'/api/users/{owner.id}/rewards/')
        self.assertEqual(response.status_code, 403)

        self.client.force_authenticate(user=owner)
        data = self.client.get(f'/api/users/{owner.id}/rewards/').json()['data']
        self.assertEqual(data['user']['totalPoints'], 15)
        self.assertEqual(data['statistics']['totalEarned'], 15)
        self.assertEqual(data['statistics']['totalTransactions'], 2)
        self.assertEqual(len(data['history']), 2)

        self.client.force_authenticate(user=UserFactory(is_staff=True))
        self.assertEqual(self.client.get(f'/api/users/{owner.id}/rewards/').status_code, 200)

    def test_health(self):
        response = self.client.get('/api/health/')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['database']['status'], 'healthy')
        self.assertEqual(response.json()['ledger']['status'], 'healthy')

    def test_health_reports_failed_check(self):
        def broken():
            raise DatabaseError('no such table: points_transactions')

        with patch.object(BasicHealthCheckView, 'health_checks', (('ledger', broken),)):
            response = self.client.get('/api/health/')

        self.assertEqual(response.status_code, 503)
        body = response.json()
        self.assertEqual(body['status'], 'unhealthy')
        self.assertEqual(body['ledger'], {'status': 'unhealthy', 'message': 'Ledger check failed'})
        self.assertNotIn('no such table', response.content.decode())

    def test_error_middleware_hides_detail_on_api_paths(self):
        middleware = ErrorHandlingMiddleware(lambda request: None)
        factory = RequestFactory()

        response = middleware.process_exception(factory.get('/api/anything/'), RuntimeError('secret detail'))
        self.assertEqual(response.status_code, 500)
        self.assertEqual(json.loads(response.content), {'code': 500, 'msg': 'Internal server error', 'data': None})

        self.assertIsNone(middleware.process_exception(factory.get('/admin/'), RuntimeError('boom')))


@pytest.mark.django_db
class TestReconcileCommand(TestCase):

    def test_reports_drift(self):
        healthy = UserFactory()
        grant_points(healthy, 10)
        broken = UserFactory()
        grant_points(broken, 10)
        PointsAccount.objects.filter(user=broken).update(total_points=99)

        out = StringIO()
        call_command('reconcile_points', stdout=out)
        output = out.getvalue()
        self.assertIn(f'User {broken.id}: balance 99 != ledger 10', output)
        self.assertNotIn(f'User {healthy.id}:', output)
        self.assertEqual(PointsService.get_balance(healthy), 10)
