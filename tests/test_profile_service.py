"""Tests for the profile lifecycle."""

from dataclasses import replace
from uuid import UUID

import pytest

from macro_tracker.domain.errors import ProfileValidationError
from macro_tracker.domain.profile import Goal, Profile
from macro_tracker.domain.sessions import SessionContext
from macro_tracker.services.achievements import ACHIEVEMENTS
from macro_tracker.services.profiles import ProfileService
from tests.conftest import FailingProfileRepository, InMemoryProfileRepository


def test_missing_profile_falls_back_to_defaults(
    profile_service: ProfileService, user_id: UUID
) -> None:
    assert profile_service.get_profile(SessionContext(user_id=user_id)) == Profile()
    assert profile_service.get_profile(SessionContext()) == Profile()


def test_complete_onboarding_computes_and_stores(
    profile_service: ProfileService,
    profile_repository: InMemoryProfileRepository,
    user_id: UUID,
) -> None:
    profile = profile_service.complete_onboarding(
        SessionContext(user_id=user_id), Profile(name="Sam")
    )

    assert profile.has_onboarded is True
    assert profile.is_premium is False
    assert profile.targets.calories == 2094
    assert profile_repository.profiles[user_id] == profile


def test_complete_onboarding_propagates_store_failure(user_id: UUID) -> None:
    service = ProfileService(FailingProfileRepository())

    with pytest.raises(RuntimeError):
        service.complete_onboarding(SessionContext(user_id=user_id), Profile())


def test_guest_onboarding_is_not_stored(
    profile_service: ProfileService, profile_repository: InMemoryProfileRepository
) -> None:
    profile = profile_service.complete_onboarding(SessionContext(), Profile())

    assert profile.has_onboarded is True
    assert profile_repository.profiles == {}


def test_update_profile_recomputes_targets(
    profile_service: ProfileService,
    profile_repository: InMemoryProfileRepository,
    user_id: UUID,
) -> None:
    session = SessionContext(user_id=user_id)
    onboarded = profile_service.complete_onboarding(session, Profile())

    updated = profile_service.update_profile(
        session, replace(onboarded, goal=Goal.MAINTAIN)
    )

    assert updated.targets.calories == 2594
    assert updated.has_onboarded is True
    assert profile_repository.profiles[user_id].targets.calories == 2594


def test_update_profile_rejects_invalid_stats(
    profile_service: ProfileService, user_id: UUID
) -> None:
    with pytest.raises(ProfileValidationError):
        profile_service.update_profile(
            SessionContext(user_id=user_id), Profile(weight_kg=0)
        )


def test_update_profile_survives_store_failure(user_id: UUID) -> None:
    service = ProfileService(FailingProfileRepository())

    updated = service.update_profile(
        SessionContext(user_id=user_id), Profile(goal=Goal.GAIN_MUSCLE)
    )

    assert updated.targets.calories == 2894


def test_update_micronutrient_targets(
    profile_service: ProfileService,
    profile_repository: InMemoryProfileRepository,
    user_id: UUID,
) -> None:
    session = SessionContext(user_id=user_id)

    updated = profile_service.update_micronutrient_targets(
        session, fiber=35, sugar=30, sodium=1800, cholesterol=250
    )

    assert updated.targets.fiber == 35
    assert updated.targets.sugar == 30
    assert updated.targets.sodium == 1800
    assert updated.targets.cholesterol == 250
    assert updated.targets.calories == Profile().targets.calories
    assert profile_repository.profiles[user_id] == updated


def test_subscribe_sets_premium(
    profile_service: ProfileService,
    profile_repository: InMemoryProfileRepository,
    user_id: UUID,
) -> None:
    session = SessionContext(user_id=user_id)
    profile_service.complete_onboarding(session, Profile())

    profile = profile_service.subscribe(session)

    assert profile.is_premium is True
    assert profile_repository.premium_updates == [(user_id, True)]
    assert profile_repository.profiles[user_id].is_premium is True


def test_record_unlocks_merges(
    profile_service: ProfileService,
    profile_repository: InMemoryProfileRepository,
    user_id: UUID,
) -> None:
    session = SessionContext(user_id=user_id)
    first_log, night_owl = ACHIEVEMENTS[5], ACHIEVEMENTS[4]

    profile = profile_service.record_unlocks(session, Profile(), [first_log])
    profile = profile_service.record_unlocks(session, profile, [first_log, night_owl])

    assert profile.preferences.unlocked_awards == ("first-log", "night-owl")
    assert profile_repository.profiles[user_id] == profile


def test_record_unlocks_without_changes_skips_write(
    profile_service: ProfileService,
    profile_repository: InMemoryProfileRepository,
    user_id: UUID,
) -> None:
    profile = Profile()

    result = profile_service.record_unlocks(SessionContext(user_id=user_id), profile, [])

    assert result is profile
    assert profile_repository.profiles == {}


def test_record_unlocks_keeps_concurrent_profile_edits(
    profile_service: ProfileService,
    profile_repository: InMemoryProfileRepository,
    user_id: UUID,
) -> None:
    session = SessionContext(user_id=user_id)
    snapshot = profile_service.complete_onboarding(session, Profile())
    profile_service.update_profile(session, replace(snapshot, weight_kg=80))

    profile_service.record_unlocks(session, snapshot, [ACHIEVEMENTS[5]])

    stored = profile_repository.profiles[user_id]
    assert stored.weight_kg == 80
    assert stored.preferences.unlocked_awards == ("first-log",)


def test_record_unlocks_survives_store_failure(user_id: UUID) -> None:
    service = ProfileService(FailingProfileRepository())

    profile = service.record_unlocks(
        SessionContext(user_id=user_id), Profile(), [ACHIEVEMENTS[5]]
    )

    assert profile.preferences.unlocked_awards == ("first-log",)
