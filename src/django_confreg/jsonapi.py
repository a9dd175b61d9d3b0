"""Helpers for the JSON endpoints."""

import json

from django import forms
from django.http import HttpRequest


def parse_json_body(request: HttpRequest) -> dict:
    """Decode the request body as a JSON object.

    Raises:
        ValueError: If the body is not valid JSON or not an object.
    """
    try:
        body = json.loads(request.body or b"{}")
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        msg = "Request body must be valid JSON"
        raise ValueError(msg) from exc
    if not isinstance(body, dict):
        msg = "Request body must be a JSON object"
        raise ValueError(msg)
    return body


def form_errors(form: forms.BaseForm) -> dict[str, list[str]]:
    """Return a form's errors as ``{field: [message, ...]}``."""
    return {field: [str(message) for message in messages] for field, messages in form.errors.items()}
