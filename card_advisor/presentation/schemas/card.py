"""Card catalog Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class CardSchema(BaseModel):
    """Schema for a catalog card."""

    id: int = Field(..., description="Catalog identifier", examples=[4])
    name: str = Field(..., description="Card name", examples=["HDFC Swiggy Credit Card"])
    issuer: str = Field(..., description="Issuing bank", examples=["HDFC Bank"])
    joining_fee: float = Field(..., ge=0, description="One-time joining fee", examples=[500])
    annual_fee: float = Field(..., ge=0, description="Annual fee", examples=[500])
    reward_type: str = Field(
        ...,
        description="One of cashback, points, miles, rewards",
        examples=["cashback"],
    )
    reward_rate: str = Field(
        ...,
        description="Reward rate description",
        examples=["10% on Swiggy, 5% on online spends, 1% other"],
    )
    eligibility_criteria: str = Field(..., description="Issuer eligibility notes")
    perks: str = Field(..., description="Card perks")
    affiliate_link: Optional[str] = Field(None, description="Application link")
    image_url: Optional[str] = Field(None, description="Card artwork URL")
    min_income: int = Field(..., ge=0, description="Minimum monthly income", examples=[25000])
    credit_score: int = Field(
        ...,
        ge=0,
        description="Minimum credit score typically required",
        examples=[710],
    )
    category: str = Field(
        ...,
        description="One of travel, shopping, fuel, dining, general",
        examples=["dining"],
    )


class CardListResponseSchema(BaseModel):
    """Schema for card listing responses."""

    success: bool = Field(True, description="Always true for successful responses")
    cards: list[CardSchema] = Field(..., description="Cards ordered by name")


class CardResponseSchema(BaseModel):
    """Schema for GET /v1/cards/{card_id} response."""

    success: bool = Field(True, description="Always true for successful responses")
    card: CardSchema = Field(..., description="The requested card")
