"""Application constants.

This module contains field names, formats and user-facing messages shared by
the store, the API layer and the maintenance scripts.
"""

# ===== Document Layout =====
DOCUMENT_COLLECTION_KEY = "cities"

# ===== City Record Fields =====
FIELD_ID = "id"
FIELD_CITY_NAME = "ciudad"
FIELD_COUNTRY = "pais"
FIELD_CURRENCY = "moneda"
FIELD_SEASONS = "temporadas"
FIELD_SERVICES = "servicios_informales"
FIELD_LAST_UPDATE = "ultima_actualizacion_aproximada"
FIELD_IMPORTANT_NOTE = "nota_importante"

# ===== Formats =====
SLUG_SEPARATOR = "-"
YEAR_MONTH_FORMAT = "%Y-%m"
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S_%f"

# ===== Messages =====
MSG_INVALID_PAYLOAD = "Payload invalido"
MSG_CITY_REQUIRED = 'El campo "ciudad" es obligatorio'
MSG_CITY_WITHOUT_SLUG = 'El campo "ciudad" debe contener letras o numeros'
MSG_CURRENCY_REQUIRED = 'El campo "moneda" es obligatorio'
MSG_SERVICES_NOT_LIST = 'El campo "servicios_informales" debe ser una lista'
MSG_CITY_EXISTS = "La ciudad ya existe"
MSG_CITY_NAME_TAKEN = "Ya existe otra ciudad con ese nombre"
MSG_CITY_NOT_FOUND = "Ciudad no encontrada"
MSG_INTERNAL_ERROR = "Error interno del servidor"
