"""
Reward catalog views.
"""
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAdminUser

from apps.common.exceptions import ResourceNotFound
from apps.common.utils import success_response, error_response, paginated_response
from ..models import Reward
from ..services import RewardRedemptionService
from ..serializers import RewardSerializer


class RewardListView(APIView):
    """Active catalog for anyone (cheapest first, optional ?type=); create for admins"""

    def get_permissions(self):
        if self.request.method == 'POST':
            return [IsAdminUser()]
        return [AllowAny()]

    def get(self, request):
        rewards = Reward.available()
        reward_type = request.query_params.get('type')
        if reward_type:
            rewards = rewards.filter(type=reward_type)
        return paginated_response(rewards, RewardSerializer, request, 'Rewards retrieved successfully')

    def post(self, request):
        serializer = RewardSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid reward data', serializer.errors)
        serializer.save()
        return success_response(serializer.data, 'Reward created successfully', status.HTTP_201_CREATED)


class RewardDetailView(APIView):
    """Reward detail for anyone (inactive rewards are hidden); update/delete for admins"""

    def get_permissions(self):
        if self.request.method in ('PUT', 'PATCH', 'DELETE'):
            return [IsAdminUser()]
        return [AllowAny()]

    def get(self, request, reward_id):
        reward = RewardRedemptionService.get_reward(reward_id)
        if not reward.is_active:
            raise ResourceNotFound('Reward not available')
        return success_response(RewardSerializer(reward).data, 'Reward retrieved successfully')

    def put(self, request, reward_id):
        reward = RewardRedemptionService.get_reward(reward_id)
        serializer = RewardSerializer(reward, data=request.data, partial=True)
        if not serializer.is_valid():
            return error_response('Invalid reward data', serializer.errors)
        serializer.save()
        return success_response(serializer.data, 'Reward updated successfully')

    def patch(self, request, reward_id):
        return self.put(request, reward_id)

    def delete(self, request, reward_id):
        reward = RewardRedemptionService.get_reward(reward_id)
        reward.delete()
        return success_response(None, 'Reward deleted successfully')


class AdminRewardListView(APIView):
    """Every reward including inactive ones, newest first"""
    permission_classes = [IsAdminUser]

    def get(self, request):
        rewards = Reward.objects.order_by('-created_at', '-id')
        return paginated_response(rewards, RewardSerializer, request, 'All rewards retrieved successfully')
