from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Request

from currency_converter.models.currency import CurrencyIsoCode, currency_for
from currency_converter.models.schemas import MoneyOut, SumRequest
from currency_converter.services.converter import CurrencyConverter

"""Conversions router.

Endpoints:
    - POST /conversions/sum         -> total of {target, amounts[]} in target
    - GET  /conversions/currencies  -> supported ISO codes

Rate source failures surface as 502 via the rate_lookup_error_handler.
sum_amounts must stay a plain def (threadpool); rate lookups block on I/O.
"""

router = APIRouter(prefix="/conversions", tags=["conversions"])


def get_converter(request: Request) -> CurrencyConverter:
    return request.app.state.converter


@router.post("/sum", response_model=MoneyOut, summary="Sum amounts into one currency")
def sum_amounts(
    payload: SumRequest,
    converter: CurrencyConverter = Depends(get_converter),
) -> MoneyOut:
    result = converter.sum(
        currency_for(payload.target), *(m.to_money() for m in payload.amounts)
    )
    return MoneyOut.from_money(result)


@router.get("/currencies", summary="List supported currency codes")
async def list_currencies() -> List[str]:
    return [c.value for c in CurrencyIsoCode]
