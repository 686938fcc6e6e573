"""EastMoney data: company profiles, financial reports, ratings, funds and fund managers."""