"""Tests for the navigation state machine."""

import pytest

from macro_tracker.domain.errors import InvalidTransitionError
from macro_tracker.domain.navigation import NavigationEvent, NavigationGuards, ViewState
from macro_tracker.services.navigation import MAIN_VIEWS, landing_view, next_view

NEW_USER = NavigationGuards()
FREE_USER = NavigationGuards(has_onboarded=True)
PREMIUM_USER = NavigationGuards(has_onboarded=True, is_premium=True)


@pytest.mark.parametrize(
    ("guards", "expected"),
    [
        (NEW_USER, ViewState.ONBOARDING),
        (FREE_USER, ViewState.PAYWALL),
        (PREMIUM_USER, ViewState.DASHBOARD),
        (NavigationGuards(is_premium=True), ViewState.ONBOARDING),
    ],
)
def test_landing_view(guards: NavigationGuards, expected: ViewState) -> None:
    assert landing_view(guards) == expected


def test_onboarding_flow_reaches_dashboard() -> None:
    view = next_view(ViewState.ONBOARDING, NavigationEvent.ONBOARDING_COMPLETED, NEW_USER)
    assert view == ViewState.AUTH

    view = next_view(view, NavigationEvent.AUTHENTICATED, FREE_USER)
    assert view == ViewState.PAYWALL

    view = next_view(view, NavigationEvent.SUBSCRIBED, PREMIUM_USER)
    assert view == ViewState.DASHBOARD


def test_profile_loaded_uses_guards() -> None:
    assert (
        next_view(ViewState.AUTH, NavigationEvent.PROFILE_LOADED, PREMIUM_USER)
        == ViewState.DASHBOARD
    )
    assert (
        next_view(ViewState.ONBOARDING, NavigationEvent.PROFILE_LOADED, FREE_USER)
        == ViewState.PAYWALL
    )


def test_capture_and_review_flow() -> None:
    view = next_view(ViewState.PROGRESS, NavigationEvent.PHOTO_CAPTURED, PREMIUM_USER)
    assert view == ViewState.CAMERA

    assert (
        next_view(view, NavigationEvent.ANALYSIS_FAILED, PREMIUM_USER)
        == ViewState.DASHBOARD
    )

    view = next_view(view, NavigationEvent.ANALYSIS_SUCCEEDED, PREMIUM_USER)
    assert view == ViewState.REVIEW
    assert next_view(view, NavigationEvent.FOOD_SAVED, PREMIUM_USER) == ViewState.DASHBOARD
    assert (
        next_view(view, NavigationEvent.REVIEW_CANCELLED, PREMIUM_USER)
        == ViewState.DASHBOARD
    )


@pytest.mark.parametrize("view", MAIN_VIEWS)
def test_main_views_share_tabs_and_sign_out(view: ViewState) -> None:
    assert next_view(view, NavigationEvent.NAVIGATE_AWARDS, PREMIUM_USER) == ViewState.AWARDS
    assert (
        next_view(view, NavigationEvent.NAVIGATE_PROFILE, PREMIUM_USER)
        == ViewState.PROFILE
    )
    assert next_view(view, NavigationEvent.SIGNED_OUT, PREMIUM_USER) == ViewState.ONBOARDING


@pytest.mark.parametrize(
    ("view", "event"),
    [
        (ViewState.ONBOARDING, NavigationEvent.PHOTO_CAPTURED),
        (ViewState.PAYWALL, NavigationEvent.NAVIGATE_DASHBOARD),
        (ViewState.CAMERA, NavigationEvent.FOOD_SAVED),
        (ViewState.REVIEW, NavigationEvent.PHOTO_CAPTURED),
    ],
)
def test_invalid_transitions_raise(view: ViewState, event: NavigationEvent) -> None:
    with pytest.raises(InvalidTransitionError):
        next_view(view, event, PREMIUM_USER)
