"""
Configuration validation for Workforce application.

This module provides validation functions to ensure the application
is properly configured before startup.
"""

from __future__ import annotations

from typing import Any

from .config import is_production, settings
from .database.connection import test_database_connection
from .logging import get_logger

logger = get_logger(__name__)


class ConfigurationError(Exception):
    """Raised when startup validation fails."""

    pass


async def validate_database_connection() -> dict[str, Any]:
    """
    Validate that the database is accessible and responsive.

    Returns a dictionary with validation results and connection details.
    """
    results: dict[str, Any] = {
        "valid": True,
        "warnings": [],
        "errors": [],
        "connection_info": None,
    }

    success, error_message = await test_database_connection()

    if success:
        results["connection_info"] = {
            "status": "connected",
            "message": "Database connection successful",
        }
        logger.info("Database connection validation successful")
    else:
        results["valid"] = False
        results["errors"].append(error_message)
        logger.error("Database connection validation failed", error=error_message)

    return results


def validate_runtime_settings() -> dict[str, Any]:
    """Check settings that are legal but risky for the current environment."""
    results: dict[str, Any] = {"valid": True, "warnings": [], "errors": []}

    if is_production():
        if settings.debug:
            results["warnings"].append(
                "Debug mode is enabled in production; GraphiQL is exposed and logs are verbose"
            )
        if settings.database_url.startswith("sqlite"):
            results["warnings"].append("SQLite database configured in production")

    if settings.password_hash_rounds < 10:
        results["warnings"].append(
            f"Password hash work factor {settings.password_hash_rounds} is below 10"
        )

    if settings.database_timeout <= 0:
        results["valid"] = False
        results["errors"].append("database_timeout must be positive")

    for warning in results["warnings"]:
        logger.warning(warning)
    for error in results["errors"]:
        logger.error(error)

    return results


async def validate_startup_configuration() -> dict[str, Any]:
    """
    Comprehensive startup validation.

    Called during application startup; raises ConfigurationError in
    production when a critical check fails.
    """
    logger.info("Starting application configuration validation")

    db_results = await validate_database_connection()
    settings_results = validate_runtime_settings()

    combined_results = {
        "overall_valid": db_results["valid"] and settings_results["valid"],
        "database": db_results,
        "settings": settings_results,
        "environment": {
            "environment": settings.environment,
            "debug": settings.debug,
        },
    }

    if combined_results["overall_valid"]:
        logger.info("Application configuration validation completed successfully")
    else:
        all_errors = db_results["errors"] + settings_results["errors"]
        logger.error("Application configuration validation failed", errors=all_errors)
        if is_production():
            raise ConfigurationError("Critical configuration validation failed in production")

    return combined_results
