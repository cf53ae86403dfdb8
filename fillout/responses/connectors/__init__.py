"""Remote data source connectors."""

from .fillout import FilloutRESTConnector

__all__ = ["FilloutRESTConnector"]
