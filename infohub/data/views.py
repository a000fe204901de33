from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .models import Tab


class WidgetView(BaseModel):
    """
    Rendered state of one widget.

    Attributes:
        tab (Tab): Which widget this view belongs to.
        title (str): Card title shown above the widget.
        status (str): 'loading', 'success' or 'error'.
        error (Optional[str]): User-facing error text when status is 'error'.
        content (Dict[str, Any]): Display values; empty while loading.
        actions (Dict[str, Any]): Widget actions and whether they are enabled.
    """
    tab: Tab
    title: str
    status: str
    error: Optional[str] = None
    content: Dict[str, Any] = Field(default_factory=dict)
    actions: Dict[str, Any] = Field(default_factory=dict)


class TabInfo(BaseModel):
    """One entry of the navigation bar."""
    id: Tab
    label: str
    active: bool = False


class TabsResponse(BaseModel):
    active: Tab
    tabs: List[TabInfo]


class SelectTabRequest(BaseModel):
    tab: Tab


class LocationReport(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class LocationErrorReport(BaseModel):
    message: str = Field(..., min_length=1, description="Reason given by the host, e.g. 'User denied Geolocation'")


class CurrencyAmountRequest(BaseModel):
    amount: str = Field(..., description="Principal in INR, as typed by the user")
