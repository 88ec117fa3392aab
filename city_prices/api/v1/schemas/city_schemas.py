"""Pydantic schemas describing the city record for API documentation.

The store keeps caller fields verbatim, so these models document the
contract rather than filter requests or responses.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PriceWindowSchema(BaseModel):
    """Price range for one season."""
    precio_min: float = Field(ge=0, examples=[50000])
    precio_max: float = Field(ge=0, examples=[120000])


class SeasonSchema(BaseModel):
    """Seasonal pricing context."""
    meses_aproximados: Optional[List[str]] = Field(default=None, examples=[["diciembre", "enero"]])
    factor_incremento_promedio: Optional[str] = Field(default=None, examples=["20% sobre temporada baja"])


class SeasonsSchema(BaseModel):
    """High and low season descriptions."""
    alta: Optional[SeasonSchema] = None
    baja: Optional[SeasonSchema] = None


class ServiceSchema(BaseModel):
    """Informal service with its seasonal prices."""
    model_config = ConfigDict(extra="allow")

    categoria: str = Field(examples=["Transporte"])
    servicio: str = Field(examples=["Taxi aeropuerto"])
    unidad: str = Field(examples=["Trayecto"])
    negociable: bool = True
    nota: Optional[str] = Field(default=None, examples=["Recargos nocturnos aplican"])
    temporada_baja: PriceWindowSchema
    temporada_alta: PriceWindowSchema


class CitySchema(BaseModel):
    """City record."""
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = Field(default=None, examples=["cartagena"])
    ciudad: str = Field(examples=["Cartagena"])
    pais: Optional[str] = Field(default=None, examples=["Colombia"])
    moneda: str = Field(examples=["COP"])
    ultima_actualizacion_aproximada: Optional[str] = Field(default=None, examples=["2024-12"])
    nota_importante: Optional[str] = Field(default=None, examples=["Incremento inusual por temporada alta."])
    temporadas: Optional[SeasonsSchema] = None
    servicios_informales: List[ServiceSchema]


class MessageSchema(BaseModel):
    """Error response body."""
    message: str


class HealthSchema(BaseModel):
    """Simple health response."""
    status: str
    timestamp: datetime


CITY_EXAMPLE = {
    "ciudad": "Cartagena",
    "pais": "Colombia",
    "moneda": "COP",
    "temporadas": {
        "alta": {"meses_aproximados": ["diciembre", "enero"], "factor_incremento_promedio": "30%"},
        "baja": {"meses_aproximados": ["septiembre", "octubre"]},
    },
    "servicios_informales": [
        {
            "categoria": "Transporte",
            "servicio": "Taxi aeropuerto",
            "unidad": "Trayecto",
            "negociable": True,
            "temporada_baja": {"precio_min": 20000, "precio_max": 30000},
            "temporada_alta": {"precio_min": 30000, "precio_max": 45000},
        }
    ],
}
