"""End-to-end pipeline tests: rows / files -> normalise -> align -> totals."""

import pytest

from spotbill import engine
from spotbill.config import BillConfig, default_config
from spotbill.exceptions import TariffError
from spotbill.tariffs import Tariff


def test_check_bill_from_rows(make_spot_rows, make_consumption_rows):
    spot = make_spot_rows("2022-10-03", [0.10] * 24)
    cons = make_consumption_rows("3.10.2022", [1.0] * 24, temps=[4.0] * 24)
    report = engine.check_bill(spot, cons)
    assert report.complete
    assert report.sums.total_consumption == 24.0
    assert report.sums.total_cost == pytest.approx(2.4)
    assert report.totals.days == 1
    assert report.totals.avg_temperature == pytest.approx(4.0)
    assert report.totals.avg_spot_price == pytest.approx(0.10)
    assert report.totals.total_amount == pytest.approx(0.024)


def test_check_bill_partial_on_parse_error(make_spot_rows, make_consumption_rows):
    spot = make_spot_rows("2022-10-03", [1.0] * 24) + make_spot_rows(
        "2022-10-04", [1.0] * 24
    )
    cons = make_consumption_rows("3.10.2022", [1.0] * 24) + make_consumption_rows(
        "4.10.2022", [1.0] * 24
    )
    cons[30]["Kulutus (kWh)"] = "???"
    report = engine.check_bill(spot, cons)
    assert not report.complete
    assert report.consumption.outcome == "parse_error"
    assert report.totals.days == 1
    assert report.sums.total_consumption == 24.0


def test_end_of_data_is_complete(make_spot_rows, make_consumption_rows):
    spot = make_spot_rows("2022-10-03", [1.0] * 24)
    cons = make_consumption_rows("3.10.2022", [1.0] * 24) + make_consumption_rows(
        "4.10.2022", [0.0] * 24
    )
    report = engine.check_bill(spot, cons)
    assert report.complete
    assert report.consumption.outcome == "end_of_data"
    assert report.totals.days == 1


def test_check_bill_rejects_bad_tariff(make_spot_rows, make_consumption_rows):
    with pytest.raises(TariffError):
        engine.check_bill([], [], tariff=Tariff(margin_eur_per_kwh=6.0))


def test_check_bill_files(spot_csv, consumption_csv):
    report = engine.check_bill_files(spot_csv, consumption_csv)
    assert report.complete
    assert report.totals.days == 2
    assert report.totals.total_consumption == 48.0
    # 48 kWh at 10 c/kWh
    assert report.sums.total_cost == pytest.approx(480.0)
    assert report.totals.total_amount == pytest.approx(4.8)
    assert report.totals.avg_spot_price == pytest.approx(10.0)
    assert report.totals.avg_temperature == pytest.approx(5.0)


def test_check_bill_files_custom_tariff(spot_csv, consumption_csv):
    base = default_config()
    cfg = BillConfig(
        spot=base.spot,
        consumption=base.consumption,
        tariff=Tariff(margin_eur_per_kwh=0.0, monthly_fee_eur=0.0),
    )
    report = engine.check_bill_files(spot_csv, consumption_csv, config=cfg)
    assert report.totals.total_final_amount == pytest.approx(4.8)
