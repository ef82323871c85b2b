"""
Core functionality of the job stats scraper.

Key features:
- Building the search URLs for the job site, one baseline URL and one per keyword.
- Fetching each search page and reading the number of listings from its result count element.
- Gathering the counts for a list of keywords, one page after another.

A count that cannot be read from the page is reported as 0, the same as a search with no listings.
"""

import os
import re
from typing import List, Optional
from urllib.parse import quote

import requests
from bs4 import BeautifulSoup
from dotenv import load_dotenv
from loguru import logger

from backend.models.models import ScrapeResult


load_dotenv()

JOB_SITE_URL = os.getenv("JOB_SITE_URL", "https://www.cwjobs.co.uk").rstrip("/")
JOB_SITE_LOCATION = os.getenv("JOB_SITE_LOCATION", "in-south-east")
RESULT_COUNT_SELECTOR = os.getenv("RESULT_COUNT_SELECTOR", "span.at-facet-header-total-results")

LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def read_timeout(value: Optional[str]) -> Optional[float]:
    """
    Parse the fetch timeout in seconds, None (no timeout) when unset or invalid.
    """
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Ignoring invalid SCRAPE_TIMEOUT {value!r}, fetching without a timeout")
        return None


SCRAPE_TIMEOUT = read_timeout(os.getenv("SCRAPE_TIMEOUT"))


def build_search_url(title: Optional[str] = None) -> str:
    """
    Build the search page URL for a keyword, or the baseline page listing all jobs.

    Args:
        title (str): The keyword to search for, None for the baseline page

    Returns:
        str: The URL of the search page
    """
    if title is None:
        return f"{JOB_SITE_URL}/jobs/{JOB_SITE_LOCATION}"
    return f"{JOB_SITE_URL}/jobs/{quote(title)}/{JOB_SITE_LOCATION}"


def parse_job_count(html: str) -> int:
    """
    Read the number of listings from a search page.

    Args:
        html (str): The search page

    Returns:
        int: The number of listings, 0 if the count element is missing or not numeric
    """
    soup = BeautifulSoup(html, "html.parser")
    element = soup.select_one(RESULT_COUNT_SELECTOR)
    if element is None:
        logger.warning(f"No element matching {RESULT_COUNT_SELECTOR} on the page")
        return 0

    # Counts are shown with thousands separators, e.g. 1,234
    text = element.get_text().replace(",", "")
    match = LEADING_INTEGER.match(text)
    if match is None:
        logger.warning(f"Result count is not a number: {text!r}")
        return 0
    return int(match.group(1))


# Fetch a search page and return its listing count
def number_of_jobs(url: str) -> int:
    """
    Fetch a search page and read its listing count.

    Raises:
        requests.RequestException: If the page could not be fetched
    """
    logger.debug(f"Fetching {url}")
    response = requests.get(url, timeout=SCRAPE_TIMEOUT)
    response.raise_for_status()
    return parse_job_count(response.text)


def gather_data(titles: List[str]) -> ScrapeResult:
    """
    Scrape the baseline listing count and the count for every keyword.

    The baseline page is fetched once so the client can work out percentages,
    then each keyword page in the order given.

    Args:
        titles (List[str]): The keywords to search for

    Returns:
        ScrapeResult: The total and one value per keyword, in input order
    """
    logger.info(f"Starting to scrape job stats for {len(titles)} keywords")
    results = ScrapeResult(total=number_of_jobs(build_search_url()))

    for title in titles:
        results.add_value(label=title, value=number_of_jobs(build_search_url(title)))

    logger.info(f"Scraped {results.total} jobs in total")
    return results
