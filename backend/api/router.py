import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_classifier, get_taxonomy
from config import settings
from models.requests import CareerAnalyzeRequest
from models.responses import (
    CareerAnalysisData,
    CareerAnalysisResponse,
    CareerPathsResponse,
    CareerPathSummary,
    CategoriesResponse,
    CategorySummary,
    HealthResponse,
    TopMatch,
)
from models.schemas.career_analysis import CareerAnalysis
from services import career_analyzer
from services.career.classifier import CareerClassifier
from services.career.rules import RULE_GROUPS
from services.career.taxonomy import Taxonomy

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _to_response_data(skills: list[str], analysis: CareerAnalysis) -> CareerAnalysisData:
    rec = analysis.recommendation
    return CareerAnalysisData(
        user_skills=skills,
        top_match=TopMatch(
            title=rec.title,
            match_score=rec.match_score,
            average_salary=rec.average_salary,
            description=rec.description,
        ),
        recommendations=rec.recommendations,
        skill_gaps=rec.skill_gaps,
        alternative_paths=analysis.alternative_paths,
        strength_areas=analysis.strength_areas,
        degraded=analysis.degraded,
        trace=analysis.trace,
        timestamp=_now(),
    )


@router.get("/")
async def root():
    return {"message": "Career Compass API is running"}


@router.get("/health", response_model=HealthResponse)
@router.get("/api/health", response_model=HealthResponse)
async def health(
    classifier: CareerClassifier = Depends(get_classifier),
    taxonomy: Taxonomy = Depends(get_taxonomy),
):
    return HealthResponse(
        timestamp=_now(),
        categories=len(taxonomy),
        rules=len(classifier.rules),
    )


@router.post("/api/career/analyze", response_model=CareerAnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze_career(request: Request, body: CareerAnalyzeRequest):
    logger.info("Analysis request received for %d skills", len(body.skills))
    try:
        analysis = career_analyzer.analyze_skills(
            body.skills,
            profile=body.profile,
            include_trace=body.include_trace,
        )
        data = _to_response_data(body.skills, analysis)
    except Exception:
        logger.exception("Career analysis endpoint failed")
        fallback = _to_response_data(body.skills, career_analyzer.fallback_analysis())
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "Analysis failed",
                "data": jsonable_encoder(fallback, by_alias=True),
            },
        )

    return CareerAnalysisResponse(data=data)


@router.get("/api/career/paths", response_model=CareerPathsResponse)
async def career_paths(
    group: str | None = None,
    classifier: CareerClassifier = Depends(get_classifier),
):
    if group is not None and group not in RULE_GROUPS:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown group '{group}'. Expected one of: {', '.join(RULE_GROUPS)}",
        )

    paths = [
        CareerPathSummary(
            key=rule.key,
            title=rule.title,
            group=rule.group,
            average_salary=rule.average_salary,
            description=rule.description,
        )
        for rule in classifier.catalog(group)
    ]
    return CareerPathsResponse(group=group, total_paths=len(paths), paths=paths)


@router.get("/api/career/categories", response_model=CategoriesResponse)
async def career_categories(taxonomy: Taxonomy = Depends(get_taxonomy)):
    return CategoriesResponse(
        categories=[
            CategorySummary(name=category.name, keyword_count=len(category.keywords))
            for category in taxonomy
        ]
    )
