"""
This file contains the functions the client view uses to talk to the job stats API and chart its results.
"""

import math

import requests
from loguru import logger

from backend.models.models import ChartBounds, ChartData, DerivedStat, ScrapeResult


# Generic function for sending POST JSON data
def post_data(url: str, data: dict) -> dict:
    """
    POST data as JSON and return the decoded JSON response.

    Raises:
        requests.RequestException: If the request fails or the API answers with an error status
    """
    logger.debug(f"Posting to {url}")
    response = requests.post(url, json=data, headers={"Content-Type": "application/json"})
    response.raise_for_status()
    return response.json()


def percentage(value: int, total: int) -> float:
    """
    Share of all listings that match a keyword, rounded to 2 decimal places.
    """
    if total == 0:
        return 0.0
    return round(value * 100 / total, 2)


def derive_chart_data(result: ScrapeResult) -> ChartData:
    """
    Turn the scraped counts into the data the chart and the table are drawn from.

    Args:
        result (ScrapeResult): The total and the per keyword counts returned by the API

    Returns:
        ChartData: {
            "total": int,
            "bounds": {"x": number of keywords, "y": largest count},
            "values": [{"label": str, "value": int, "percentage": float}]
        }
    """
    largest = max((item.value for item in result.values), default=0)
    return ChartData(
        total=result.total,
        bounds=ChartBounds(x=len(result.values), y=math.ceil(largest)),
        values=[
            DerivedStat(label=item.label, value=item.value, percentage=percentage(item.value, result.total))
            for item in result.values
        ],
    )
