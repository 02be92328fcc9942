from pydantic import BaseModel, Field


class WeightEntryCreate(BaseModel):
    user_id: int
    weight: float = Field(gt=0, lt=500, description="Вес в кг")
