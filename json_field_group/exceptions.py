"""
Custom exceptions for JSON field groups.
"""

from django.core.exceptions import ImproperlyConfigured


class JSONFieldGroupError(Exception):
    """Base exception for JSON field group errors."""
    pass


class AttributeCastError(JSONFieldGroupError, ImproperlyConfigured):
    """Raised when a model attribute written by a JSON group has no JSON cast."""

    def __init__(self, attribute: str):
        super().__init__(
            f"Attribute '{attribute}' has no JSON cast. "
            f"Use a models.JSONField or list it in the model's json_casts."
        )
        self.attribute = attribute


class UnsupportedConfigurationError(JSONFieldGroupError, AttributeError):
    """Raised when a configuration method cannot be applied to child fields."""

    def __init__(self, method: str):
        super().__init__(f"'{method}' is not a field configuration method.")
        self.method = method
