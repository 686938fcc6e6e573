# investdata

Python clients for public Chinese market data services: company
profiles, financial reports, ratings and forecasts, fund details and
fund managers, bond yield curves, historical prices, money-flow
figures and keyword search for securities.

The data is for personal research and is not investment advice.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The HTTP client

Every client takes an optional `investdata.httpclient.HTTPClient`
(created for you when left out). One instance can be shared by all of
them:

```python
from investdata.httpclient import HTTPClient

http = HTTPClient()             # timeout defaults to 300 seconds
http = HTTPClient(timeout=30)   # or pass session=requests.Session()
```

It offers `get_json`, `get_bytes`, `post_json` and `post_form`, plus
the helpers `build_url(url, params)` and `random_user_agent()`.

## Data sources

| Module                      | Class       | Provides                                                 |
|-----------------------------|-------------|----------------------------------------------------------|
| `investdata.chinabond`      | `ChinaBond` | bond yield curves (`query_tree`, `query_fxsyl`, `query_current_syl`, `query_aaa_company_bond_syl`) |
| `investdata.eniu`           | `Eniu`      | historical stock prices and volatility                   |
| `investdata.zszx`           | `Zszx`      | main-money net inflows                                   |
| `investdata.sina`           | `Sina`      | keyword search for securities, A shares first            |
| `investdata.qq`             | `QQ`        | keyword search for securities                            |

The EastMoney services are split into one class per topic, all in
`investdata.eastmoney` and all built on `EastMoneyBase`:

| Module                               | Class                    | Method(s)                                               |
|--------------------------------------|--------------------------|---------------------------------------------------------|
| `company_profile`                    | `CompanyProfileAPI`      | `query_company_profile`                                 |
| `fina_main`                          | `FinaMainAPI`            | `query_historical_fina_main_data`, `query_fina_publish_date_list` |
| `free_holders`                       | `FreeHoldersAPI`         | `query_free_holders`                                    |
| `org_rating`                         | `OrgRatingAPI`           | `query_org_rating`                                      |
| `profit_predict`                     | `ProfitPredictAPI`       | `query_profit_predict`                                  |
| `historical_pe_list`                 | `HistoricalPEAPI`        | `query_historical_pe_list`                              |
| `jiazhipinggu`                       | `JiaZhiPingGuAPI`        | `query_jia_zhi_ping_gu`                                 |
| `zonghepingjia`                      | `ZongHePingJiaAPI`       | `query_zong_he_ping_jia`                                |
| `valuation_status`                   | `ValuationStatusAPI`     | `query_valuation_status`                                |
| `industry_list`                      | `IndustryListAPI`        | `query_industry_list`                                   |
| `fund_info`                          | `FundInfoAPI`            | `query_fund_info`                                       |
| `fund_search`                        | `FundSearchAPI`          | `search_fund`                                           |
| `query_fund_by_stock`                | `FundByStockAPI`         | `query_fund_by_stock`                                   |
| `fund_manager_base_list`             | `FundManagerBaseListAPI` | `fund_manager_base_list`, `query_fund_msn_manager_info` |
| `fund_managers`                      | `FundManagersAPI`        | `fund_managers` (and the base list methods)             |

## Usage

```python
from investdata.httpclient import HTTPClient
from investdata.chinabond import ChinaBond
from investdata.eniu import Eniu
from investdata.zszx import Zszx
from investdata.eastmoney.company_profile import CompanyProfileAPI
from investdata.eastmoney.fina_main import FinaMainAPI, FinaReportType, ValueListType
from investdata.eastmoney.fund_managers import FundManagersAPI, ParamFundManagerFilter

http = HTTPClient()

# Main financial indicators, newest report first
history = FinaMainAPI(http).query_historical_fina_main_data("600188.SH")
annual = history.filter_by_report_type(FinaReportType.YEAR)
roe_median = history.mid_value(ValueListType.ROE, 0, FinaReportType.YEAR)
rising_eps = history.is_increasing_by_years(ValueListType.EPS, 5, FinaReportType.YEAR)

# Company profile
profile = CompanyProfileAPI(http).query_company_profile("002459.SZ")
print(profile.profile_string())
print(profile.main_forms_string())

# Fund managers, filtered and sorted
managers = FundManagersAPI(http).fund_managers("all", "penavgrowth", "desc")
picked = managers.filter(ParamFundManagerFilter(min_working_years=8, min_yieldse=15.0,
                                                max_current_fund_count=10))
picked.sort_by_yieldse()

# Historical price volatility, annualised
prices = Eniu(http).query_historical_stock_price("002312.SZ")
print(prices.historical_volatility("YEAR"))

# Main-money net inflows over a date range
inflows = Zszx(http).query_main_money_net_inflows("002028.SZ", "2021-10-01", "2021-11-01")
print(inflows.sum_main_net_in())
print(inflows)  # sums over the last 3, 5, 10, 20, 30 and 40 days

# Current yield of the AAA securities company bond curve (0.0 when unavailable)
print(ChinaBond(http).query_aaa_company_bond_syl())
```

Security codes use the `<code>.<market>` form, for example `600188.SH`
or `002459.SZ`. Letter case does not matter.

`investdata.stats` holds the small helpers used throughout:
`mid_value` (median), `std_deviation` (population standard deviation)
and `latest_trading_day` (the latest weekday on or before a date).

## Errors

`investdata.httpclient.APIError` is raised when a request fails at the
network level, when a service answers with a non-success HTTP status
or invalid JSON, and when a service reports an error in its reply or
returns data that cannot be used.

`ValueError` is raised for bad input: a median or standard deviation
of nothing, a volatility with no prices (or one that comes out NaN),
and a security code that is not of the `<code>.<market>` form where
one is required.

## What is not included

- There is no stock screener that selects stocks by thresholds such as
  ROE, growth or market cap.
- There is no listing of every fund's net asset value by fund type.
- There is no single object that gathers all sources together; create
  each client with a shared `HTTPClient` as shown above.
- There is no command-line program, server or storage; this is a
  library only.