from pydantic import BaseModel, model_validator


class PatchModel(BaseModel):
    """
    Частичное обновление записи.

    Поля, которых нет в запросе, остаются неустановленными и не попадают в
    changes(); явный null для них запрещён, так как ни одно поле записи не
    допускает пустого значения.
    """

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"Поле '{name}' не может быть null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)
