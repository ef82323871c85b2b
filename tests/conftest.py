"""
Shared fixtures: search pages and a fake job site standing in for requests.get.
"""

import pytest
import requests


def search_page(count: str | None) -> str:
    """A search results page, without the count element when count is None."""
    header = "" if count is None else f'<span class="at-facet-header-total-results">{count}</span>'
    return f"<html><body><h1>Jobs</h1><div class='facets'>{header}</div></body></html>"


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeJobSite:
    """
    Serves canned pages by URL and records every URL requested.
    """

    def __init__(self, pages: dict):
        self.pages = pages
        self.requested = []
        self.timeouts = []

    def get(self, url, timeout=None):
        self.requested.append(url)
        self.timeouts.append(timeout)
        if url not in self.pages:
            return FakeResponse("Not found", status_code=404)
        return FakeResponse(self.pages[url])


@pytest.fixture
def job_site(monkeypatch):
    site = FakeJobSite(
        {
            "https://www.cwjobs.co.uk/jobs/in-south-east": search_page("12,345"),
            "https://www.cwjobs.co.uk/jobs/React/in-south-east": search_page("1,234"),
            "https://www.cwjobs.co.uk/jobs/Node/in-south-east": search_page("617"),
            "https://www.cwjobs.co.uk/jobs/Cobol/in-south-east": search_page(None),
        }
    )
    monkeypatch.setattr(requests, "get", site.get)
    return site


@pytest.fixture
def make_page():
    return search_page
