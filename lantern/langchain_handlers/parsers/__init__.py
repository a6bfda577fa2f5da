"""LangChain output parsers for Lantern.

- JSON repair state machine for almost-JSON model output
- Augmentation parser producing ``AIAugmentation`` objects
"""

from lantern.langchain_handlers.parsers.augmentation_parser import AugmentationOutputParser
from lantern.langchain_handlers.parsers.json_repair import JSONRepairer, JSONRepairError, repair_json

__all__ = [
    "AugmentationOutputParser",
    "JSONRepairer",
    "JSONRepairError",
    "repair_json",
]
