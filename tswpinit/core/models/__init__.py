"""
Domain models — Pydantic types for the scaffolder.

All models are re-exported here for convenient access:

    from tswpinit.core.models import Action, Receipt, Template, WriteRequest
"""

from tswpinit.core.models.action import Action, Receipt
from tswpinit.core.models.config import ScaffoldConfig
from tswpinit.core.models.preset import LoaderRule, Preset
from tswpinit.core.models.template import Template, WriteRequest

__all__ = [
    # action.py
    "Action",
    # preset.py
    "LoaderRule",
    "Preset",
    "Receipt",
    # config.py
    "ScaffoldConfig",
    # template.py
    "Template",
    "WriteRequest",
]
