"""
Points ledger exceptions.
"""
from apps.common.exceptions import BusinessRuleViolation


class InsufficientPointsError(BusinessRuleViolation):
    """A debit exceeds the account balance"""
    default_code = 'insufficient_points'

    def __init__(self, required, available):
        self.required = required
        self.available = available
        super().__init__(f"Insufficient points. You need {required} points but have {available}.")
