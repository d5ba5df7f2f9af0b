"""Calculator endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from strcalc.core.protocols import INumberSummer
from strcalc.models.calculation import SumRequest, SumResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["calculator"])


def get_summer(request: Request) -> INumberSummer:
    return request.app.state.summer


@router.post("/sum", response_model=SumResponse)
async def sum_numbers(body: SumRequest, request: Request) -> SumResponse:
    """Sum a delimited number string."""
    total = get_summer(request).sum(body.numbers)
    logger.debug("summed %r to %d", body.numbers, total)
    return SumResponse(numbers=body.numbers, total=total)
