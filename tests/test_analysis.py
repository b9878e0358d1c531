import json
from urllib.parse import parse_qs, urlparse

import pytest
import requests
import responses

from weapp.analysis import (
    API_GET_DAILY_RETAIN,
    API_GET_DAILY_SUMMARY,
    API_GET_DAILY_VISIT_TREND,
    API_GET_MONTHLY_RETAIN,
    API_GET_MONTHLY_VISIT_TREND,
    API_GET_USER_PORTRAIT,
    API_GET_VISIT_DISTRIBUTION,
    API_GET_VISIT_PAGE,
    API_GET_WEEKLY_RETAIN,
    API_GET_WEEKLY_VISIT_TREND,
    Analysis,
)
from weapp.core import Requester, WeappError

BASE = "https://api.example.com"
ERROR = {"errcode": 40001, "errmsg": "invalid credential"}

CASES = [
    ("get_user_portrait", API_GET_USER_PORTRAIT),
    ("get_visit_distribution", API_GET_VISIT_DISTRIBUTION),
    ("get_visit_page", API_GET_VISIT_PAGE),
    ("get_daily_summary", API_GET_DAILY_SUMMARY),
    ("get_monthly_retain", API_GET_MONTHLY_RETAIN),
    ("get_weekly_retain", API_GET_WEEKLY_RETAIN),
    ("get_daily_retain", API_GET_DAILY_RETAIN),
    ("get_monthly_visit_trend", API_GET_MONTHLY_VISIT_TREND),
    ("get_weekly_visit_trend", API_GET_WEEKLY_VISIT_TREND),
    ("get_daily_visit_trend", API_GET_DAILY_VISIT_TREND),
]


@pytest.fixture
def mock():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def analysis():
    return Analysis(Requester(lambda: "token", BASE))


@pytest.mark.parametrize("method,path", CASES)
def test_posts_date_range_with_token(mock, analysis, method, path):
    payload = {"errcode": 0, "list": [{"ref_date": "20170313"}]}
    mock.add(responses.POST, BASE + path, json=payload)

    result = getattr(analysis, method)("20170313", "20170313")

    assert result == payload
    request = mock.calls[0].request
    parsed = urlparse(request.url)
    assert parsed.path == path
    assert parse_qs(parsed.query) == {"access_token": ["token"]}
    assert json.loads(request.body) == {"begin_date": "20170313", "end_date": "20170313"}


def test_user_portrait_error_raises(mock, analysis):
    mock.add(responses.POST, BASE + API_GET_USER_PORTRAIT, json=ERROR)

    with pytest.raises(WeappError) as info:
        analysis.get_user_portrait("20170306", "20170312")

    assert info.value.errcode == 40001
    assert info.value.errmsg == "invalid credential"


def test_weekly_retain_error_raises(mock, analysis):
    mock.add(responses.POST, BASE + API_GET_WEEKLY_RETAIN, json=ERROR)

    with pytest.raises(WeappError) as info:
        analysis.get_weekly_retain("20170306", "20170312")

    assert info.value.errcode == 40001
    assert info.value.errmsg == "invalid credential"


def test_monthly_visit_trend_error_raises(mock, analysis):
    mock.add(responses.POST, BASE + API_GET_MONTHLY_VISIT_TREND, json=ERROR)

    with pytest.raises(WeappError) as info:
        analysis.get_monthly_visit_trend("20170201", "20170228")

    assert info.value.errcode == 40001
    assert info.value.errmsg == "invalid credential"


def test_daily_summary_error_raises(mock, analysis):
    mock.add(responses.POST, BASE + API_GET_DAILY_SUMMARY, json=ERROR)

    with pytest.raises(WeappError) as info:
        analysis.get_daily_summary("20170313", "20170313")

    assert info.value.errcode == 40001
    assert info.value.errmsg == "invalid credential"


def test_user_portrait_keeps_nested_attributes(mock, analysis):
    payload = {
        "ref_date": "20170611",
        "visit_uv_new": {"province": [{"id": 31, "name": "广东省", "value": 215}]},
        "visit_uv": {"genders": [{"id": 1, "name": "男", "value": 2146}]},
    }
    mock.add(responses.POST, BASE + API_GET_USER_PORTRAIT, json=payload)

    result = analysis.get_user_portrait("20170611", "20170617")

    assert result["visit_uv_new"]["province"][0]["name"] == "广东省"
    assert result["visit_uv"]["genders"] == payload["visit_uv"]["genders"]


def test_http_failure_raises(mock, analysis):
    mock.add(responses.POST, BASE + API_GET_DAILY_SUMMARY, status=500)

    with pytest.raises(requests.RequestException) as info:
        analysis.get_daily_summary("20170313", "20170313")

    assert not isinstance(info.value, WeappError)