"""Decoder for the zipped CSV listing of a database's dataset codes."""

from __future__ import annotations

import csv
import io
import logging
import zipfile

from ..core.errors import QuandlApiError, QuandlDecodeError
from .models import DatasetCode

SEPARATOR = "/"

logger = logging.getLogger("quandl_api_client")


def _read_single_entry(content: bytes) -> bytes:
    try:
        archive = zipfile.ZipFile(io.BytesIO(content))
    except zipfile.BadZipFile as exc:
        logger.error("listing body is not a zip archive")
        raise QuandlDecodeError("response body is not a valid zip archive") from exc

    with archive:
        entries = archive.infolist()
        if len(entries) != 1:
            logger.error("listing archive has unexpected entry count=%s", len(entries))
            raise QuandlApiError(f"expected one file in archive, found {len(entries)}")
        try:
            return archive.read(entries[0])
        except (zipfile.BadZipFile, OSError) as exc:
            raise QuandlDecodeError(
                f"cannot read `{entries[0].filename}` from zip archive"
            ) from exc


def _strip_database_prefix(db_with_code: str) -> str:
    # "YC/MYS5Y" -> "MYS5Y"; the last segment wins when several are present.
    if SEPARATOR not in db_with_code:
        raise QuandlApiError(f"`{SEPARATOR}` not found in `{db_with_code}`")
    return db_with_code.rsplit(SEPARATOR, 1)[-1]


def parse_dataset_codes_csv(text: str) -> list[DatasetCode]:
    """Parse ``"<db>/<code>","<description>"`` rows, aborting on the first bad one."""

    codes: list[DatasetCode] = []
    try:
        for line_number, row in enumerate(csv.reader(io.StringIO(text, newline="")), start=1):
            if not row:
                continue
            if len(row) != 2:
                raise QuandlDecodeError(
                    f"line {line_number}: expected 2 columns, found {len(row)}"
                )
            db_with_code, desc = row
            codes.append(DatasetCode(code=_strip_database_prefix(db_with_code), desc=desc))
    except csv.Error as exc:
        raise QuandlDecodeError(f"malformed CSV in dataset listing: {exc}") from exc
    return codes


def decode_dataset_codes(content: bytes) -> list[DatasetCode]:
    raw = _read_single_entry(content)
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise QuandlDecodeError("dataset listing is not valid UTF-8") from exc
    codes = parse_dataset_codes_csv(text)
    logger.debug("dataset listing decoded count=%s", len(codes))
    return codes


__all__ = [
    "parse_dataset_codes_csv",
    "decode_dataset_codes",
]
