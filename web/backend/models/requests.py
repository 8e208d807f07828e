#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RedemptionQuoteRequest(BaseModel):
    """Request to price an order paid partly with points."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    subtotal: float = Field(ge=0, description="Order subtotal before discount")
    points: int = Field(ge=0, description="Points to redeem")
    available_points: int = Field(ge=0, description="Points currently available to the user")
