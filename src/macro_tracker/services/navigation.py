"""Client navigation state machine.

The table maps ``(view, event)`` to a resolver that receives the profile
guards; views consult it instead of scattering onboarding/premium checks.
"""

from collections.abc import Callable

from macro_tracker.domain.errors import InvalidTransitionError
from macro_tracker.domain.navigation import NavigationEvent, NavigationGuards, ViewState

Resolver = Callable[[NavigationGuards], ViewState]

MAIN_VIEWS = (
    ViewState.DASHBOARD,
    ViewState.PROGRESS,
    ViewState.AWARDS,
    ViewState.PROFILE,
)

_TAB_EVENTS = {
    NavigationEvent.NAVIGATE_DASHBOARD: ViewState.DASHBOARD,
    NavigationEvent.NAVIGATE_PROGRESS: ViewState.PROGRESS,
    NavigationEvent.NAVIGATE_AWARDS: ViewState.AWARDS,
    NavigationEvent.NAVIGATE_PROFILE: ViewState.PROFILE,
}


def landing_view(guards: NavigationGuards) -> ViewState:
    """Return the view a loaded profile should land on."""
    if not guards.has_onboarded:
        return ViewState.ONBOARDING
    if guards.is_premium:
        return ViewState.DASHBOARD
    return ViewState.PAYWALL


def _to(view: ViewState) -> Resolver:
    return lambda _guards: view


def _build_table() -> dict[tuple[ViewState, NavigationEvent], Resolver]:
    table: dict[tuple[ViewState, NavigationEvent], Resolver] = {
        (ViewState.ONBOARDING, NavigationEvent.ONBOARDING_COMPLETED): _to(
            ViewState.AUTH
        ),
        (ViewState.ONBOARDING, NavigationEvent.PROFILE_LOADED): landing_view,
        (ViewState.AUTH, NavigationEvent.AUTHENTICATED): _to(ViewState.PAYWALL),
        (ViewState.AUTH, NavigationEvent.PROFILE_LOADED): landing_view,
        (ViewState.PAYWALL, NavigationEvent.SUBSCRIBED): _to(ViewState.DASHBOARD),
        (ViewState.PAYWALL, NavigationEvent.SIGNED_OUT): _to(ViewState.ONBOARDING),
        (ViewState.CAMERA, NavigationEvent.ANALYSIS_SUCCEEDED): _to(ViewState.REVIEW),
        (ViewState.CAMERA, NavigationEvent.ANALYSIS_FAILED): _to(ViewState.DASHBOARD),
        (ViewState.REVIEW, NavigationEvent.FOOD_SAVED): _to(ViewState.DASHBOARD),
        (ViewState.REVIEW, NavigationEvent.REVIEW_CANCELLED): _to(ViewState.DASHBOARD),
    }
    for view in MAIN_VIEWS:
        table[(view, NavigationEvent.PHOTO_CAPTURED)] = _to(ViewState.CAMERA)
        table[(view, NavigationEvent.SIGNED_OUT)] = _to(ViewState.ONBOARDING)
        for event, target in _TAB_EVENTS.items():
            table[(view, event)] = _to(target)
    return table


TRANSITIONS = _build_table()


def next_view(
    current: ViewState, event: NavigationEvent, guards: NavigationGuards
) -> ViewState:
    """Resolve the view reached from ``current`` on ``event``."""
    resolver = TRANSITIONS.get((current, event))
    if resolver is None:
        raise InvalidTransitionError(
            f"Event {event.value} is not valid from {current.value}"
        )
    return resolver(guards)
