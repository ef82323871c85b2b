"""
A simple page that lets a user pick keywords and charts how many jobs are listed for each.
"""

import os
import time

from dotenv import load_dotenv
from flask import Flask, render_template, request
from flask_cors import CORS
from loguru import logger

from backend.helpers.functions import derive_chart_data, post_data
from backend.models.models import ScrapeResult

load_dotenv()

JOB_STATS_API_URL = os.getenv("JOB_STATS_API_URL", "http://localhost:8000/api/jobstats")
DEFAULT_KEYWORDS = [
    keyword.strip()
    for keyword in os.getenv("DEFAULT_KEYWORDS", "Frontend,BackEnd,React,Node").split(",")
    if keyword.strip()
]

app = Flask(__name__)
CORS(app)


@app.route("/", methods=["GET", "POST"])
def index():
    """
    This function handles the keyword form and the chart.
    """
    if request.method == "GET":
        return render_template("index.html", options=DEFAULT_KEYWORDS, selected=DEFAULT_KEYWORDS)

    options = request.form.getlist("options")
    selected = request.form.getlist("titles")
    keyword = request.form.get("keyword", "").strip()

    if request.form.get("action") == "add":
        # A new keyword is offered and selected straight away
        if keyword and keyword not in options:
            options.append(keyword)
            selected.append(keyword)
        return render_template("index.html", options=options, selected=selected)

    chart_data = None
    start_time = time.perf_counter()
    try:
        returned_data = post_data(JOB_STATS_API_URL, {"titles": selected})
        chart_data = derive_chart_data(ScrapeResult.model_validate(returned_data))
    # General exception handling
    except Exception as e:
        logger.error(f"Error fetching job stats: {e}")
    time_to_fetch = time.perf_counter() - start_time

    return render_template(
        "index.html",
        options=options,
        selected=selected,
        chart_data=chart_data,
        time_to_fetch=round(time_to_fetch, 3),
    )


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=True)
