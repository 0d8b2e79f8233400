from pydantic import BaseModel, Field
from typing import List


class MealItemResponse(BaseModel):
    """Snapshot of a single meal item"""

    name: str
    packaging: str = Field(..., description="Packaging label (e.g., 'Wrapper', 'Bottle')")
    price: float = Field(..., ge=0, description="Item price")

    model_config = {"frozen": True}


class MealResponse(BaseModel):
    """Snapshot of a meal with its derived total"""

    items: List[MealItemResponse] = Field(default_factory=list)
    total_price: float = Field(..., ge=0, description="Sum of item prices")

    model_config = {"frozen": True}
