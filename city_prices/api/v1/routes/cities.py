"""City API routes - thin layer delegating to the city store.
Only handles HTTP concerns; store errors are translated by the app's exception handler."""
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response, status

from city_prices.api.v1.schemas.city_schemas import CITY_EXAMPLE, CitySchema, MessageSchema
from city_prices.application.services.city_store import CityStore
from city_prices.core.dependencies import get_city_store
from city_prices.core.exceptions import NotFoundError

router = APIRouter(prefix="/cities", tags=["cities"])

_NOT_FOUND = {404: {"model": MessageSchema, "description": "Ciudad no encontrada"}}


@router.get(
    "",
    summary="Lista todas las ciudades registradas",
    responses={200: {"model": List[CitySchema], "description": "Listado de ciudades"}},
)
def list_cities(store: CityStore = Depends(get_city_store)):
    return store.list_cities()


@router.get(
    "/{city_id}",
    summary="Obtiene una ciudad por identificador o nombre",
    responses={200: {"model": CitySchema, "description": "Ciudad encontrada"}, **_NOT_FOUND},
)
def get_city(city_id: str, store: CityStore = Depends(get_city_store)):
    city = store.get_city(city_id)
    if city is None:
        raise NotFoundError()
    return city


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Crea una ciudad con sus servicios",
    responses={
        201: {"model": CitySchema, "description": "Ciudad creada"},
        400: {"model": MessageSchema, "description": "Datos invalidos"},
        409: {"model": MessageSchema, "description": "La ciudad ya existe"},
    },
)
def create_city(
    payload: Dict[str, Any] = Body(..., examples=[CITY_EXAMPLE]),
    store: CityStore = Depends(get_city_store),
):
    """
    Create a city.

    The id is derived from ``ciudad``; every other field is stored as sent.
    """
    return store.create_city(payload)


@router.put(
    "/{city_id}",
    summary="Actualiza una ciudad existente",
    responses={
        200: {"model": CitySchema, "description": "Ciudad actualizada"},
        400: {"model": MessageSchema, "description": "Datos invalidos"},
        409: {"model": MessageSchema, "description": "Ya existe otra ciudad con ese nombre"},
        **_NOT_FOUND,
    },
)
def update_city(
    city_id: str,
    payload: Dict[str, Any] = Body(..., examples=[{"nota_importante": "Precios en alza"}]),
    store: CityStore = Depends(get_city_store),
):
    """
    Partially update a city.

    Top-level fields replace the stored ones (nested objects are not merged).
    Renaming ``ciudad`` changes the id.
    """
    city = store.update_city(city_id, payload)
    if city is None:
        raise NotFoundError()
    return city


@router.delete(
    "/{city_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Elimina una ciudad",
    responses={204: {"description": "Ciudad eliminada"}, **_NOT_FOUND},
)
def delete_city(city_id: str, store: CityStore = Depends(get_city_store)):
    if not store.delete_city(city_id):
        raise NotFoundError()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
