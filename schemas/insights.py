from pydantic import BaseModel, StringConstraints
from typing import Annotated, Dict, List, Union


class ChartSeries(BaseModel):
    key: str
    chart_type: str
    label: str
    labels: List[str]
    data: List[Union[int, float]]


class ChatGreeting(BaseModel):
    content: str
    capabilities: List[str]
    suggestions: Dict[str, str]


class ChatRequest(BaseModel):
    message: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ChatReply(BaseModel):
    message: str
    reply: str
