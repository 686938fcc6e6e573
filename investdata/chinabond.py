"""China bond yield curve data source."""

from __future__ import annotations

import logging

from .httpclient import APIError, HTTPClient, random_user_agent
from .stats import latest_trading_day

logger = logging.getLogger(__name__)

TREE_URL = "https://yield.chinabond.com.cn/cbweb-mn/yc/queryTree?locale=zh_CN"
FXSYL_URL = (
    "https://yield.chinabond.com.cn/cbweb-mn/yc/searchXyFxsyl?xyzSelect=txy&&workTimes={date}"
    "&&dxbj=4&&qxll=1,&&yqqxN=N&&yqqxK=K&&ycDefIds={item_id},&&locale=zh_CN"
)
AAA_COMPANY_BOND = "中债证券公司债收益率曲线(AAA)"


class ChinaBond:
    """Client for the bond yield curve service."""

    def __init__(self, http: HTTPClient | None = None):
        self.http = http if http is not None else HTTPClient()

    def query_tree(self) -> dict[str, str]:
        """Return a mapping of curve name to curve id."""
        items = self.http.get_json(TREE_URL, headers={"User-Agent": random_user_agent()})
        return {item.get("name", ""): item.get("id", "") for item in items or []}

    def query_fxsyl(self, tree_item_id: str, date: str) -> list[list[float]]:
        """Return [[term in years, yield], ...] for a curve on a YYYY-mm-dd date."""
        url = FXSYL_URL.format(date=date, item_id=tree_item_id)
        resp = self.http.post_json(url, headers={"User-Agent": random_user_agent()})
        charts = (resp or {}).get("ycChartDataList") or []
        if not charts:
            return []
        return [list(point) for point in charts[0].get("seriesData") or []]

    def query_current_syl(self, bond_name: str, date: str | None = None) -> float:
        """Return the shortest-term yield of the named curve on ``date``.

        ``date`` defaults to the latest trading day.
        """
        item_id = self.query_tree().get(bond_name, "")
        if not item_id:
            raise APIError(f"债券名称不存在:{bond_name}")
        data = self.query_fxsyl(item_id, date or latest_trading_day())
        if not data:
            raise APIError("收益率数据为空")
        syl = data[0]
        if len(syl) != 2:
            raise APIError(f"收益率数据异常：{syl}")
        return syl[1]

    def query_aaa_company_bond_syl(self) -> float:
        """Return the current AAA company bond yield, or 0.0 when unavailable."""
        try:
            return self.query_current_syl(AAA_COMPANY_BOND)
        except APIError as exc:
            logger.error("QueryCurrentSyl error:%s", exc)
            return 0.0