# app/utils.py
from typing import Any, Dict, Optional
from bson import ObjectId
from datetime import datetime
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .either import Either

def to_id(doc: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Convierte _id -> id (str) y los ObjectIds de primer nivel a strings.
    Si doc es None, devuelve {}.
    Los bytes (imágenes) se dejan tal cual: los formatea el servicio.
    """
    if doc is None:
        return {}
    d = dict(doc)

    if "_id" in d:
        d["id"] = str(d.pop("_id"))

    for key, value in d.items():
        if isinstance(value, ObjectId):
            d[key] = str(value)
        elif isinstance(value, datetime):
            d[key] = value.isoformat()

    return d

def to_object_id(value: str) -> Optional[ObjectId]:
    """Convierte un string a ObjectId; None si no es válido."""
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)

# ==================== Resultados -> HTTP ====================

def result_to_response(result: Either, success_status: int, failure_status: int = 400) -> JSONResponse:
    """
    Traduce el resultado de un servicio a respuesta HTTP.
    Failure -> failure_status con el mensaje; Success -> success_status con el valor.
    """
    status_code = failure_status if result.is_failure() else success_status
    return JSONResponse(status_code=status_code, content=jsonable_encoder(result.value))

def validation_message(exc: ValidationError) -> str:
    """Primer error de validación como "campo: mensaje"."""
    err = exc.errors()[0]
    field = ".".join(str(part) for part in err.get("loc", ())) or "body"
    ctx_error = (err.get("ctx") or {}).get("error")
    msg = str(ctx_error) if ctx_error else err.get("msg", "Valor inválido")
    return f"{field}: {msg}"
