"""
This file contains the Pydantic models for the application.
"""

from typing import List
from pydantic import BaseModel


class JobQuery(BaseModel):
    """
    The body posted to the job stats endpoint: the keywords to search for.
    """
    titles: List[str]


class LabelledValue(BaseModel):
    """
    Number of listings found for a single keyword.
    """
    label: str
    value: int


class ScrapeResult(BaseModel):
    """
    This class holds the listing count of the baseline page and one count per keyword.
    """
    total: int = 0
    values: List[LabelledValue] = []

    def add_value(self, label: str, value: int) -> None:
        """
        Append the count for a keyword, keeping the order the keywords were scraped in.

        Args:
            label (str): The keyword
            value (int): Number of listings found for it
        """
        self.values.append(LabelledValue(label=label, value=value))


class DerivedStat(BaseModel):
    label: str
    value: int
    percentage: float


class ChartBounds(BaseModel):
    x: int
    y: int


class ChartData(BaseModel):
    """
    What the client view renders: the total, the bar chart bounds and one row per keyword.
    """
    total: int
    bounds: ChartBounds
    values: List[DerivedStat]
