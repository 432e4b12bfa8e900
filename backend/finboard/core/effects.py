"""Action Effects — ordered side-effect signals returned by mutation actions.

Invariants:
    - Effects are immutable values; the caller performs them in list order
    - A successful create/update yields [CacheInvalidation, NavigationRedirect]
    - A successful delete yields [CacheInvalidation] only

Design Decisions:
    - Returned, not performed: the framework (or a test) decides how to apply
      them, and ordering is asserted on a plain list
"""

from dataclasses import dataclass

from finboard.core.domain_types import EffectType, INVOICES_VIEW_PATH


@dataclass(frozen=True)
class CacheInvalidation:
    """Marks the cached data of a view path as stale."""
    path: str

    def to_dict(self) -> dict:
        return {"type": EffectType.CACHE_INVALIDATION.value, "path": self.path}


@dataclass(frozen=True)
class NavigationRedirect:
    """Instructs the caller to transition to another view."""
    location: str

    def to_dict(self) -> dict:
        return {
            "type": EffectType.NAVIGATION_REDIRECT.value,
            "location": self.location,
        }


Effect = CacheInvalidation | NavigationRedirect


def invalidate_and_redirect(path: str = INVOICES_VIEW_PATH) -> list[Effect]:
    """Effects for create/update: invalidate first, then redirect."""
    return [CacheInvalidation(path), NavigationRedirect(path)]


def invalidate_only(path: str = INVOICES_VIEW_PATH) -> list[Effect]:
    """Effects for delete: the listing view stays where it is."""
    return [CacheInvalidation(path)]
