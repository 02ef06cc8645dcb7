"""View states and events for client navigation."""

from dataclasses import dataclass
from enum import Enum


class ViewState(Enum):
    """Screens a client can be on."""

    ONBOARDING = "ONBOARDING"
    AUTH = "AUTH"
    PAYWALL = "PAYWALL"
    DASHBOARD = "DASHBOARD"
    PROGRESS = "PROGRESS"
    CAMERA = "CAMERA"
    REVIEW = "REVIEW"
    PROFILE = "PROFILE"
    AWARDS = "AWARDS"


class NavigationEvent(Enum):
    """Events that move a client between screens."""

    ONBOARDING_COMPLETED = "onboarding_completed"
    AUTHENTICATED = "authenticated"
    PROFILE_LOADED = "profile_loaded"
    SUBSCRIBED = "subscribed"
    PHOTO_CAPTURED = "photo_captured"
    ANALYSIS_SUCCEEDED = "analysis_succeeded"
    ANALYSIS_FAILED = "analysis_failed"
    FOOD_SAVED = "food_saved"
    REVIEW_CANCELLED = "review_cancelled"
    NAVIGATE_DASHBOARD = "navigate_dashboard"
    NAVIGATE_PROGRESS = "navigate_progress"
    NAVIGATE_AWARDS = "navigate_awards"
    NAVIGATE_PROFILE = "navigate_profile"
    SIGNED_OUT = "signed_out"


@dataclass(frozen=True)
class NavigationGuards:
    """Profile flags that decide guarded transitions."""

    has_onboarded: bool = False
    is_premium: bool = False
