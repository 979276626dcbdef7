"""Chart builders and display formatting."""

from .formatting import PLACEHOLDER, format_change, format_money, format_percent, format_volume
from .price_charts import make_price_chart, make_temperature_chart

__all__ = [
    "PLACEHOLDER",
    "format_change",
    "format_money",
    "format_percent",
    "format_volume",
    "make_price_chart",
    "make_temperature_chart",
]
