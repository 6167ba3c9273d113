"""Engine error taxonomy.

Every rejection is a ``ValueError`` subclass so callers that only care about
"the request was refused" can catch ``ValueError``; callers that need to map
outcomes (e.g. to HTTP status codes) catch the specific class.
"""

from __future__ import annotations


class CarbonTrackError(ValueError):
    """Base class for all engine rejections."""


class FactorNotFoundError(CarbonTrackError):
    """No active emission factor matches the requested category/subcategory."""

    def __init__(self, category: str, subcategory: str, region: str | None = None) -> None:
        self.category = category
        self.subcategory = subcategory
        self.region = region
        where = f" in {region}" if region else ""
        super().__init__(f"Emission factor not found for {category}/{subcategory}{where}")


class UnsupportedConversionError(CarbonTrackError):
    """Raised in strict mode when no conversion path exists between two units."""

    def __init__(self, from_unit: str, to_unit: str) -> None:
        self.from_unit = from_unit
        self.to_unit = to_unit
        super().__init__(f"Cannot convert {from_unit} to {to_unit}")


class ChallengeFullError(CarbonTrackError):
    def __init__(self, challenge_id: str, max_participants: int) -> None:
        self.challenge_id = challenge_id
        self.max_participants = max_participants
        super().__init__(f"Challenge is full ({max_participants} participants maximum)")


class NotParticipantError(CarbonTrackError):
    def __init__(self, challenge_id: str, user_id: str) -> None:
        self.challenge_id = challenge_id
        self.user_id = user_id
        super().__init__(f"User {user_id} is not participating in challenge {challenge_id}")


class UserNotFoundError(CarbonTrackError):
    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")


class ChallengeNotFoundError(CarbonTrackError):
    def __init__(self, challenge_id: str) -> None:
        self.challenge_id = challenge_id
        super().__init__(f"Challenge not found: {challenge_id}")


class ActivityNotFoundError(CarbonTrackError):
    def __init__(self, activity_id: str) -> None:
        self.activity_id = activity_id
        super().__init__(f"Activity not found: {activity_id}")


class InvalidProgressError(CarbonTrackError):
    def __init__(self, challenge_id: str, user_id: str, value: float) -> None:
        self.challenge_id = challenge_id
        self.user_id = user_id
        self.value = value
        super().__init__(f"Progress must be non-negative, got {value} for {user_id} in challenge {challenge_id}")
