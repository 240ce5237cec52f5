"""
Points-related validators.
"""
from rest_framework import serializers


def validate_points_cost(value):
    """
    Validate a reward points cost (must be at least 1).

    Raises:
        serializers.ValidationError: If the cost is below 1

    Returns:
        int: Validated points cost
    """
    if value < 1:
        raise serializers.ValidationError("Points cost must be at least 1.")
    return value
