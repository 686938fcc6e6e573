import datetime as dt
import math

import pytest
import responses

from investdata.eniu import Eniu, HistoricalStockPrice
from investdata.httpclient import APIError

PRICES = [
    8.47, 8.54, 8.3, 7.57, 7.77, 7.4, 8.23, 7.83, 7.43, 7.02,
    6.75, 6.73, 6.7, 6.5, 7.45, 7.4, 7.25, 7.15, 7.25, 7.0,
]


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


def test_get_path_code():
    assert Eniu().get_path_code("002459.SZ") == "sz002459"
    assert Eniu().get_path_code("002459") == ""


def test_query_historical_stock_price(rsps):
    rsps.add(
        responses.GET,
        "https://eniu.com/chart/pricea/sz002312/t/all",
        json={"date": ["2021-11-18", "2021-11-19"], "price": [7.1, 7.3]},
    )
    data = Eniu().query_historical_stock_price("002312.SZ")
    assert data.date == ["2021-11-18", "2021-11-19"]
    assert data.historical_volatility("YEAR") >= 0


def test_query_historical_stock_price_error(rsps):
    rsps.add(responses.GET, "https://eniu.com/chart/pricea/sz002312/t/all", status=404)
    with pytest.raises(APIError):
        Eniu().query_historical_stock_price("002312.SZ")


def test_historical_volatility_periods():
    data = HistoricalStockPrice(price=list(PRICES))
    d = data.historical_volatility("DAY")
    w = data.historical_volatility("WEEK")
    m = data.historical_volatility("MONTH")
    y = data.historical_volatility("YEAR")
    assert d > 0
    assert w == pytest.approx(d * math.sqrt(5))
    assert m == pytest.approx(d * math.sqrt(21.75))
    assert y == pytest.approx(d * math.sqrt(250))


def test_historical_volatility_case_and_default():
    data = HistoricalStockPrice(price=list(PRICES))
    assert data.historical_volatility("day") == data.historical_volatility("DAY")
    assert data.historical_volatility("other") == data.historical_volatility("YEAR")


def test_historical_volatility_constant_prices_is_zero():
    assert HistoricalStockPrice(price=[5.0] * 6).historical_volatility("YEAR") == 0.0


def test_historical_volatility_empty_raises():
    with pytest.raises(ValueError, match="no historical price data"):
        HistoricalStockPrice().historical_volatility("DAY")


def test_historical_volatility_zero_prices_raise_nan():
    with pytest.raises(ValueError, match="NaN"):
        HistoricalStockPrice(price=[0.0, 0.0, 0.0]).historical_volatility("DAY")


def test_last_year_final_price():
    data = HistoricalStockPrice(
        date=["2020-12-30", "2020-12-31", "2021-01-04"], price=[10.0, 11.0, 12.0]
    )
    assert data.last_year_final_price(dt.date(2021, 6, 1)) == 11.0
    assert data.last_year_final_price(dt.date(2023, 6, 1)) == 0.0


def test_last_year_final_price_skips_first_entry():
    data = HistoricalStockPrice(date=["2020-12-31", "2021-01-04"], price=[10.0, 12.0])
    assert data.last_year_final_price(dt.date(2021, 6, 1)) == 0.0
    assert HistoricalStockPrice().last_year_final_price(dt.date(2021, 6, 1)) == 0.0