"""
The four strings produced for the rendering layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class RenderedTime:
    hours: str
    minutes: str
    meridiem: Optional[str]
    description: str
