from pydantic import BaseModel, Field


class NutritionEntryCreate(BaseModel):
    user_id: int
    calories: int = Field(ge=0)
    protein: int = Field(ge=0, description="Белки, г")
    carbs: int = Field(ge=0, description="Углеводы, г")
    fats: int = Field(ge=0, description="Жиры, г")
