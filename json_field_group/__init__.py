"""
JSON field groups for admin panels.

Group several fields under one heading and store their values in a single
JSON column of a Django model.
"""
from .exceptions import (
    JSONFieldGroupError,
    AttributeCastError,
    UnsupportedConfigurationError,
)
from .Fields import *
from .Core import (
    Panel,
    RequestValues,
    RequestValuesProtocol,
    ModelContainer,
    FieldContainerProtocol,
)
from .Serializers import FormSerializer

__version__ = '1.0.0'
