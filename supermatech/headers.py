"""
Supermatech Backend: Alert Header Builders
============================================

What:  Builds the X-<app>-alert, X-<app>-error and X-<app>-params headers the
       Angular client reads to show a toast after each mutation or failure.
How:   Plain functions returning header dicts; routes merge them into the
       response. With translation enabled the alert is an i18n key such as
       "supermatechApp.orderLine.created", otherwise an English sentence.

Example (creation, translation enabled):
    X-supermatechApp-alert:  supermatechApp.orderLine.created
    X-supermatechApp-params: 12
"""

from typing import Dict
from urllib.parse import quote_plus


def create_alert(app_name: str, message: str, param: str) -> Dict[str, str]:
    """Alert header pair; the param is URL-encoded so any identifier is header-safe."""
    return {
        f"X-{app_name}-alert": message,
        f"X-{app_name}-params": quote_plus(param),
    }


def entity_creation_alert(
    app_name: str, enable_translation: bool, entity_name: str, param: str
) -> Dict[str, str]:
    message = (
        f"{app_name}.{entity_name}.created"
        if enable_translation
        else f"A new {entity_name} is created with identifier {param}"
    )
    return create_alert(app_name, message, param)


def entity_update_alert(
    app_name: str, enable_translation: bool, entity_name: str, param: str
) -> Dict[str, str]:
    message = (
        f"{app_name}.{entity_name}.updated"
        if enable_translation
        else f"A {entity_name} is updated with identifier {param}"
    )
    return create_alert(app_name, message, param)


def entity_deletion_alert(
    app_name: str, enable_translation: bool, entity_name: str, param: str
) -> Dict[str, str]:
    message = (
        f"{app_name}.{entity_name}.deleted"
        if enable_translation
        else f"A {entity_name} is deleted with identifier {param}"
    )
    return create_alert(app_name, message, param)


def failure_alert(
    app_name: str,
    enable_translation: bool,
    entity_name: str,
    error_key: str,
    default_message: str,
) -> Dict[str, str]:
    """Headers attached to 400 responses raised by InvalidRequestError."""
    message = f"error.{error_key}" if enable_translation else default_message
    return {
        f"X-{app_name}-error": message,
        f"X-{app_name}-params": quote_plus(entity_name),
    }
