"""API throttling classes."""

from rest_framework.throttling import UserRateThrottle


class GradePassRateThrottle(UserRateThrottle):
    """Throttle limiting grade to pass updates per user."""
    scope = "grade_pass_update"
    rate = "60/hour"
