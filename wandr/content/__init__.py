"""City information content sources."""

from wandr.content.factory import get_city_info_source
from wandr.content.interfaces import CityInfoSource

__all__ = ["CityInfoSource", "get_city_info_source"]
