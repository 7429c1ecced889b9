"""Orchestrator: skills in, one career analysis out.

Pipeline:
1. Merge request skills with any skills on the caller's profile
2. Categorize skills into per-category counts
3. Run the rule cascade to pick the career recommendation
4. Collect alternative paths (other rules that also matched) and strength areas
5. Attach a diagnostic trace when requested

The analysis never fails outright: an unexpected error in stages 2-4 is logged
and answered with the default Career Explorer record marked ``degraded``.
"""

import logging
from collections.abc import Sequence

from config import settings
from models.requests import ProfileSnapshot
from models.schemas.career_analysis import CareerAnalysis
from models.schemas.category_trace import CategoryTrace
from services.career.career_paths import EXPLORER_RULE
from services.career.classifier import to_alternative, to_recommendation
from services.pipeline.registry import get_stage

logger = logging.getLogger(__name__)


def _merge_skills(skills: Sequence[str], profile: ProfileSnapshot | None) -> list[str]:
    merged = list(skills)
    if profile is not None:
        merged.extend(profile.skills)
    return merged


def fallback_analysis() -> CareerAnalysis:
    """Default record used when the engine itself fails."""
    return CareerAnalysis(
        recommendation=to_recommendation(EXPLORER_RULE, {}),
        degraded=True,
    )


def analyze_skills(
    skills: Sequence[str],
    profile: ProfileSnapshot | None = None,
    include_trace: bool = False,
) -> CareerAnalysis:
    """Run categorizer + classifier and assemble the analysis."""
    all_skills = _merge_skills(skills, profile)
    want_trace = include_trace or settings.trace_enabled

    try:
        # --- Stage 1: category counts ---
        counts = get_stage("categorizer").predict(skills=all_skills)
        logger.debug("Category counts: %r", counts)

        # --- Stage 2: rule cascade (first match wins) ---
        classifier = get_stage("classifier")
        recommendation = classifier.predict(counts=counts)

        # Remaining matches only feed alternatives and the trace
        matched = []
        if settings.alternative_paths_limit > 0 or want_trace:
            matched = classifier.engine.matching_rules(counts)
        alternatives = [
            to_alternative(rule, counts)
            for rule in matched
            if rule.key != recommendation.key
        ][:settings.alternative_paths_limit]
        strength_areas = counts.top(settings.strength_areas_limit)
    except Exception:
        logger.exception("Career analysis failed for %d skills", len(all_skills))
        return fallback_analysis()

    trace = None
    if want_trace:
        trace = CategoryTrace(
            counts=counts.as_dict(),
            matched_rules=[rule.key for rule in matched],
            skills_analyzed=len(all_skills),
        )

    logger.info(
        "Career recommendation: %s (score=%d, %d skills)",
        recommendation.title,
        recommendation.match_score,
        len(all_skills),
    )
    return CareerAnalysis(
        recommendation=recommendation,
        alternative_paths=alternatives,
        strength_areas=strength_areas,
        trace=trace,
    )
