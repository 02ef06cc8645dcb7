"""Models for food photo analysis results."""

from pydantic import BaseModel, Field

UNKNOWN_FOOD_NAME = "Unknown Food"


class FoodEstimate(BaseModel):
    """Nutrient estimate for the whole visible portion in a photo."""

    food_name: str
    calories: int = Field(ge=0)
    protein: int = Field(ge=0)
    carbs: int = Field(ge=0)
    fat: int = Field(ge=0)
    fiber: int = Field(default=0, ge=0)
    sugar: int = Field(default=0, ge=0)
    sodium: int = Field(default=0, ge=0)
    cholesterol: int = Field(default=0, ge=0)
    description: str
    confidence: int = Field(ge=0, le=100)

    @property
    def is_unrecognized(self) -> bool:
        """True for the placeholder a model returns when it sees no food."""
        return self.confidence == 0 and self.food_name == UNKNOWN_FOOD_NAME
