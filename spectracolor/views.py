from __future__ import annotations

import json
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods
from pydantic import ValidationError

from spectracolor.config.logging import get_logger
from spectracolor.core.exceptions import AppException, ValidationException
from spectracolor.services import get_config, get_color_conversion_service, get_reference_repository
from spectracolor.shared.schemas.color import (
    ConversionRequestSchema,
    ConversionResponseSchema,
    ParseRequestSchema,
    ParseResponseSchema,
)
from spectracolor.shared.schemas.common import ErrorResponse
from spectracolor.shared.utils.helpers import sanitize_for_json
from spectracolor.shared.utils.parsing import EXAMPLE_SPECTRAL_DATA, get_groups, parse_spectral_data
from spectracolor.shared.utils.validators import validate_request_size

logger = get_logger(__name__)


def _json_error(message: str, status: int = 400):
    return JsonResponse(ErrorResponse(detail=message).model_dump(), status=status)


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ())) or "body"
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


def _read_payload(request) -> dict:
    """JSON object body, or the form fields of an urlencoded/multipart body."""
    declared = request.META.get("CONTENT_LENGTH") or 0
    try:
        declared = int(declared)
    except (TypeError, ValueError):
        declared = 0
    limit = get_config().max_request_size
    validate_request_size(declared, limit)
    validate_request_size(len(request.body), limit)

    if request.content_type == "application/json":
        try:
            payload = json.loads(request.body or b"{}")
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise ValidationException("Invalid JSON body")
        if not isinstance(payload, dict):
            raise ValidationException("JSON body must be an object")
        return payload
    return request.POST.dict()


@require_GET
def conversion_options(request):
    config = get_config()
    repository = get_reference_repository()
    return JsonResponse({
        "illuminants": [i.value for i in repository.list_illuminants()],
        "observers": [o.value for o in repository.list_observers()],
        "defaults": {
            "illuminant": config.default_illuminant,
            "observer": config.default_observer,
            "applyGammaCorrection": config.apply_gamma_correction,
        },
        "exampleData": EXAMPLE_SPECTRAL_DATA,
    })


@csrf_exempt
@require_http_methods(["POST"])
def parse_spectrum(request):
    try:
        body = ParseRequestSchema.model_validate(_read_payload(request))
    except ValidationError as exc:
        return _json_error(_format_validation_error(exc), status=422)
    except AppException as exc:
        return _json_error(exc.message, status=exc.status_code)

    samples = parse_spectral_data(body.data)
    response = ParseResponseSchema.model_validate({
        "samples": [s.to_dict() for s in samples],
        "groups": get_groups(samples),
        "count": len(samples),
    })
    return JsonResponse(sanitize_for_json(response.model_dump(mode="json")))


@csrf_exempt
@require_http_methods(["POST"])
def convert_spectrum(request):
    try:
        body = ConversionRequestSchema.model_validate(_read_payload(request))
    except ValidationError as exc:
        return _json_error(_format_validation_error(exc), status=422)
    except AppException as exc:
        return _json_error(exc.message, status=exc.status_code)

    service = get_color_conversion_service()
    try:
        samples = parse_spectral_data(body.data)
        results = service.convert_samples(
            samples,
            group=body.group,
            illuminant=body.illuminant,
            observer=body.observer,
            apply_gamma=body.apply_gamma_correction,
        )
        response = ConversionResponseSchema.model_validate({
            "results": [r.to_dict() for r in results],
            "groups": get_groups(samples),
            "sampleCount": len(samples),
        })
        return JsonResponse(sanitize_for_json(response.model_dump(by_alias=True, mode="json")))

    except AppException as exc:
        return _json_error(exc.message, status=exc.status_code)
    except Exception as exc:  # noqa: BLE001 - generic failure path
        logger.error("Spectrum conversion failed", exc_info=True)
        return _json_error(f"Conversion error: {exc}", status=500)
