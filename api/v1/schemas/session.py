from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from core.models.meal import AnalysisResult
from core.session import Tab, View


class SessionOut(BaseModel):
    view: View
    active_tab: Tab
    error: str | None = None
    pending: AnalysisResult | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TabIn(BaseModel):
    tab: Tab
