from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from . import config
from .errors import InvalidInsightError
from .intake import InsightIntake
from .schemas import IntakeResult, ValidationResult
from .validation import explain_insight

router = APIRouter()

_intake = InsightIntake(
    kinds=config.INSIGHT_KINDS_ALLOWED if config.INSIGHT_STRICT_KINDS else None,
    policy=config.INVALID_INSIGHT_POLICY,
)


def get_intake():
    return _intake


@router.post('/insights/validate', response_model=ValidationResult)
def validate(candidate: Any = Body(None), intake: InsightIntake = Depends(get_intake)):
    reason = explain_insight(candidate, intake.kinds)
    return {"valid": reason is None, "reason": reason}


@router.post('/insights', response_model=IntakeResult)
def submit(candidate: Any = Body(None), intake: InsightIntake = Depends(get_intake)):
    try:
        insight = intake.submit(candidate)
    except InvalidInsightError as e:
        raise HTTPException(422, detail=e.reason)
    if insight is None:
        return {"accepted": False, "reason": explain_insight(candidate, intake.kinds)}
    return {"accepted": True, "insight": insight}


@router.get('/insights/kinds')
def kinds(intake: InsightIntake = Depends(get_intake)):
    return sorted(intake.kinds if intake.kinds is not None else config.INSIGHT_KINDS_ALLOWED)


@router.get('/insights/stats')
def stats(intake: InsightIntake = Depends(get_intake)):
    return intake.stats()
