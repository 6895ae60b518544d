"""Pydantic request/response schemas for the COD checkout API.

Request fields are deliberately loose: the storefront sends numbers as
either strings or numbers, and missing required fields are reported by
the orchestrator with the ``{ok: false}`` envelope rather than a 422.
"""

from typing import Any

from pydantic import BaseModel

Scalar = str | int | float | None


class StartCodRequest(BaseModel):
    name: Scalar = None
    phone: Scalar = None
    house: Scalar = None
    street: Scalar = None
    landmark: Scalar = None
    city: Scalar = None
    state: Scalar = None
    pincode: Scalar = None
    variant_id: Scalar = None
    quantity: Scalar = None
    total: Scalar = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Asha",
                    "phone": "9876543210",
                    "house": "12B",
                    "street": "MG Road",
                    "landmark": "Near City Mall",
                    "city": "Pune",
                    "state": "Maharashtra",
                    "pincode": "411001",
                    "variant_id": 123,
                    "quantity": 2,
                    "total": 500,
                }
            ]
        }
    }


class VerifyCodRequest(BaseModel):
    phone: Scalar = None
    otp: Scalar = None


class OkResponse(BaseModel):
    ok: bool
    msg: str | None = None


class VerifyCodResponse(BaseModel):
    ok: bool
    msg: str | None = None
    order: dict[str, Any] | None = None
