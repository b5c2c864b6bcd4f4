"""
Host-side components: request and model adapters and panels.
"""
from .RequestValues import RequestValues, RequestValuesProtocol
from .FieldContainer import ModelContainer, FieldContainerProtocol
from .Panel import Panel
