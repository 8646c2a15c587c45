from __future__ import annotations
import logging
from pathlib import Path
from typing import IO, Iterable, Mapping, Optional

import numpy as np
import pandas as pd

from . import canon, utils
from .config import SourceConfig
from .exceptions import IngestError, ParseError, require
from .types import (
    CSVFields,
    ConsumptionResult,
    DayHourMap,
    HourMap,
    SpotPriceResult,
)

logger = logging.getLogger(__name__)

Row = Mapping[str, str]


def read_rows(
    source: str | Path | IO[str],
    *,
    delimiter: str,
    fields: Optional[CSVFields] = None,
    encoding: str = canon.DEFAULT_ENCODING,
) -> list[dict[str, str]]:
    """
    Read a delimited file into a list of row dicts with string values.

    Every cell is kept as text so locale handling (decimal commas, unpadded
    dates) stays with the normalisers. Raises IngestError when the file cannot
    be read or a column named in `fields` is absent.
    """
    try:
        df = pd.read_csv(
            source,
            sep=delimiter,
            dtype=str,
            keep_default_na=False,
            encoding=encoding,
        )
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as exc:
        raise IngestError(f"Cannot read {source}: {exc}") from exc
    except pd.errors.EmptyDataError:
        return []

    df.columns = [str(c).strip() for c in df.columns]
    if fields is not None:
        missing = [c for c in fields.columns() if c not in df.columns]
        require(
            not missing,
            f"Missing column(s) {', '.join(map(repr, missing))} in {source}; "
            f"found: {', '.join(map(repr, df.columns))}",
            IngestError,
        )
    return df.to_dict("records")


def _field(row: Row, name: str, line: int) -> str:
    try:
        return str(row[name])
    except KeyError:
        raise ParseError("Missing field", row=line, field=name) from None


def _date_and_hour(row: Row, fields: CSVFields, line: int) -> tuple[str, str]:
    raw = _field(row, fields.date_time, line)
    try:
        if fields.date:
            raw_date = _field(row, fields.date, line)
            # the time column may still carry the date in front
            raw_hour = raw.split()[-1] if raw.split() else raw
        else:
            raw_date, raw_hour = utils.split_date_time(raw)
        return raw_date.strip(), utils.convert_hour_str(raw_hour)
    except ValueError as exc:
        raise ParseError(str(exc), row=line, field=fields.date_time, value=raw) from exc


def _to_float(raw: str, field_name: str, line: int) -> float:
    try:
        return float(raw)
    except ValueError:
        raise ParseError(
            "Not a number", row=line, field=field_name, value=raw
        ) from None


def _flush(target: DayHourMap, day: str, hours: HourMap) -> None:
    if day in target:
        logger.warning("Date %s seen again, rows are not sorted by date", day)
    target[day] = dict(hours)


def normalize_spot_prices(rows: Iterable[Row], fields: CSVFields) -> SpotPriceResult:
    """
    Group spot price rows into a DayHourMap.

    Rows must be sorted by date. A price that is not a number ends the pass:
    days already completed are kept, the day in progress is dropped.
    """
    result = SpotPriceResult()
    day_map: HourMap = {}
    current_day: Optional[str] = None

    # header is line 1
    for line, row in enumerate(rows, start=2):
        try:
            day, hour = _date_and_hour(row, fields, line)
            if current_day is not None and day != current_day:
                _flush(result.prices, current_day, day_map)
                day_map.clear()
            current_day = day
            day_map[hour] = _to_float(
                _field(row, fields.value, line).strip(), fields.value, line
            )
        except ParseError as err:
            logger.error("Spot price parse failed, keeping %d day(s): %s", len(result.prices), err)
            result.outcome = "parse_error"
            result.error = err
            return result

    if current_day is not None:
        _flush(result.prices, current_day, day_map)
    logger.debug("Spot prices normalised for %d day(s)", len(result.prices))
    return result


def normalize_consumption(rows: Iterable[Row], fields: CSVFields) -> ConsumptionResult:
    """
    Group consumption rows into a DayHourMap and collect daily mean temperatures.

    - Dates 'D.M.YYYY' become 'YYYY-MM-DD'; decimal commas become periods.
    - A repeated hour (autumn clock change) is summed into one bucket.
    - A consumption of exactly '0.00' marks the end of the metered window:
      the pass stops and the day in progress is neither counted nor kept.
    - An unparseable number ends the pass with outcome 'parse_error'.
    """
    result = ConsumptionResult()
    day_map: HourMap = {}
    day_temperatures: list[float] = []
    current_day: Optional[str] = None
    prev_hour: Optional[str] = None

    def flush_day(day: str) -> None:
        result.days += 1
        _flush(result.consumption, day, day_map)
        result.temperatures.append(float(np.mean(day_temperatures)))
        day_map.clear()
        day_temperatures.clear()

    for line, row in enumerate(rows, start=2):
        try:
            raw_date, hour = _date_and_hour(row, fields, line)
            try:
                day = utils.convert_date_str(raw_date)
            except ValueError as exc:
                field_name = fields.date or fields.date_time
                raise ParseError(str(exc), row=line, field=field_name, value=raw_date) from exc

            if current_day is not None and day != current_day:
                flush_day(current_day)
                prev_hour = None
            current_day = day

            consumption_str = utils.replace_comma(_field(row, fields.value, line))
            if consumption_str == canon.END_OF_DATA_SENTINEL:
                logger.info("Consumption data ends on %s, %d day(s) counted", day, result.days)
                result.outcome = "end_of_data"
                return result

            kwh = _to_float(consumption_str, fields.value, line)
            temperature = _to_float(
                utils.replace_comma(_field(row, fields.temperature, line)),
                fields.temperature,
                line,
            )
        except ParseError as err:
            logger.error("Consumption parse failed, keeping %d day(s): %s", result.days, err)
            result.outcome = "parse_error"
            result.error = err
            return result

        if hour == prev_hour:
            logger.debug("Repeated hour %s on %s, summing consumption", hour, day)
            day_map[hour] = day_map.get(hour, 0.0) + kwh
        else:
            day_map[hour] = kwh
        day_temperatures.append(temperature)
        prev_hour = hour

    if current_day is not None:
        flush_day(current_day)
    logger.debug("Consumption normalised for %d day(s)", result.days)
    return result


def read_spot_prices(source: str | Path | IO[str], config: SourceConfig) -> SpotPriceResult:
    rows = read_rows(
        source, delimiter=config.delimiter, fields=config.fields, encoding=config.encoding
    )
    return normalize_spot_prices(rows, config.fields)


def read_consumption(source: str | Path | IO[str], config: SourceConfig) -> ConsumptionResult:
    rows = read_rows(
        source, delimiter=config.delimiter, fields=config.fields, encoding=config.encoding
    )
    return normalize_consumption(rows, config.fields)
