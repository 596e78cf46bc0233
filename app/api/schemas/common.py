"""Piezas compartidas por los esquemas de la API."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Expone los campos en camelCase (`createdAt`) y acepta ambos nombres al construir."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DeleteOut(BaseModel):
    success: bool = True
