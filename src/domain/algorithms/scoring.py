from __future__ import annotations

from collections.abc import Mapping

from src.domain.models import ScoringProfile


def compute_score(counts: Mapping[str, int], weights: Mapping[str, float]) -> float:
    """Weighted mean of per-category POI counts.

    Categories missing from `counts` contribute zero but still carry their
    weight in the denominator.
    """

    total_weight = 0.0
    weighted_sum = 0.0
    for category, weight in weights.items():
        total_weight += weight
        weighted_sum += counts.get(category, 0) * weight

    if total_weight == 0:
        return 0.0
    return weighted_sum / total_weight


def resolve_weights(
    *,
    custom_weights: Mapping[str, float] | None,
    profile: ScoringProfile | None,
    default_profile: ScoringProfile,
) -> dict[str, float]:
    """Pick the weights a request is scored with.

    Precedence:
      1) non-empty custom weights supplied with the request
      2) the requested profile, if it exists
      3) the default profile
    """

    if custom_weights:
        return dict(custom_weights)
    if profile is not None:
        return dict(profile.weights)
    return dict(default_profile.weights)
