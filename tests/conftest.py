import pytest

from spotbill import canon


def _fi_number(value: float) -> str:
    return f"{value:.2f}".replace(".", ",")


@pytest.fixture
def make_spot_rows():
    """Factory: 24 (or len(prices)) spot rows for one ISO date."""

    def _make(day_iso: str, prices):
        return [
            {
                canon.SPOT_DATE_TIME_FIELD: f"{day_iso} {h:02d}:00:00",
                canon.SPOT_PRICE_FIELD: str(p),
            }
            for h, p in enumerate(prices)
        ]

    return _make


@pytest.fixture
def make_consumption_rows():
    """Factory: consumption rows for one 'D.M.YYYY' date, unpadded hours, decimal commas."""

    def _make(day_fi: str, kwh, temps=None, hours=None):
        hours = hours if hours is not None else list(range(len(kwh)))
        temps = temps if temps is not None else [0.0] * len(kwh)
        return [
            {
                canon.CONSUMPTION_DATE_TIME_FIELD: f"{day_fi} {h}:00",
                canon.CONSUMPTION_FIELD: _fi_number(v),
                canon.TEMPERATURE_FIELD: _fi_number(t),
            }
            for h, v, t in zip(hours, kwh, temps)
        ]

    return _make


@pytest.fixture
def spot_csv(tmp_path):
    lines = ["DateTime,Hinta"]
    for day in ("2022-10-03", "2022-10-04"):
        lines += [f"{day} {h:02d}:00:00,10.0" for h in range(24)]
    path = tmp_path / "spot.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def consumption_csv(tmp_path):
    lines = ["Alkaa;Kulutus (kWh);Keskilämpötila"]
    for day in ("3.10.2022", "4.10.2022"):
        lines += [f"{day} {h}:00;1,00;5,0" for h in range(24)]
    # zero padding after the metered window
    lines += [f"5.10.2022 {h}:00;0,00;4,0" for h in range(24)]
    path = tmp_path / "consumption.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
