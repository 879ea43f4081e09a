"""Two-pass analysis of a delimited text file.

The sample pass reads the first few lines to pick a delimiter and decide
whether there is a header. The full pass reopens the file and streams every
line through per-column accumulators, so memory stays bounded by the column
count rather than the row count.
"""

from __future__ import annotations

from itertools import islice
from typing import TYPE_CHECKING

from ...constants import Defaults, Limits
from ...domain.entities.tabular import TabularAnalysis
from ...domain.services.column_statistics import ColumnAccumulator
from ..logging.null_logger import NullLogger
from .dialect import detect_delimiter, detect_header
from .exceptions import DataParseError, DataSourceNotFoundError
from .field_parser import parse_fields

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from ...application.ports.services import LoggerPort
    from ...config import PreflightConfig


def _strip_terminator(line: str) -> str:
    return line.rstrip("\r\n")


class TabularAnalyzer:
    pass

    def __init__(
        self,
        *,
        encoding: str = Defaults.ENCODING,
        sample_lines: int = Limits.SAMPLE_LINES,
        max_unique_values: int = Limits.MAX_UNIQUE_VALUES,
        max_sample_values: int = Limits.MAX_SAMPLE_VALUES,
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        self.encoding = encoding
        self.sample_lines = sample_lines
        self.max_unique_values = max_unique_values
        self.max_sample_values = max_sample_values
        self.logger = logger or NullLogger()

    @classmethod
    def from_config(
        cls, config: PreflightConfig, logger: LoggerPort | None = None
    ) -> TabularAnalyzer:
        return cls(
            encoding=config.encoding,
            sample_lines=config.sample_lines,
            max_unique_values=config.max_unique_values,
            max_sample_values=config.max_sample_values,
            logger=logger,
        )

    def analyze(self, path: Path) -> TabularAnalysis:
        try:
            return self._analyze(path)
        except FileNotFoundError as e:
            raise DataSourceNotFoundError(f"File not found: {path}") from e
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Cannot decode {path} as {self.encoding}: {e.reason}"
            ) from e
        except OSError as e:
            raise DataParseError(f"Failed to read {path}: {e}") from e

    def _analyze(self, path: Path) -> TabularAnalysis:
        sample = self._read_sample(path)
        if not sample:
            self.logger.debug(f"{path.name}: empty file, using default analysis")
            return TabularAnalysis.empty()

        delimiter = detect_delimiter(sample)
        first_row = parse_fields(sample[0], delimiter)
        column_count = len(first_row)
        if column_count == 0:
            return TabularAnalysis.empty(delimiter)
        has_header = detect_header(sample, delimiter)
        self.logger.debug(
            f"{path.name}: delimiter={delimiter.display_name}, "
            f"header={has_header}, columns={column_count}"
        )

        accumulators = [
            ColumnAccumulator(
                index,
                max_unique=self.max_unique_values,
                max_samples=self.max_sample_values,
            )
            for index in range(column_count)
        ]
        row_count = 0
        skipped = 0
        header_pending = has_header
        for line in self._iter_lines(path):
            if not line.strip():
                continue
            if header_pending:
                header_pending = False
                continue
            fields = parse_fields(line, delimiter)
            if len(fields) != column_count:
                skipped += 1
                continue
            for accumulator, value in zip(accumulators, fields, strict=True):
                accumulator.update(value)
            row_count += 1
        if skipped:
            self.logger.debug(
                f"{path.name}: skipped {skipped} rows with mismatched field count"
            )

        names: list[str | None] = (
            [name or None for name in first_row] if has_header else [None] * column_count
        )
        columns = tuple(
            accumulator.finalize(name)
            for accumulator, name in zip(accumulators, names, strict=True)
        )
        return TabularAnalysis(
            delimiter=delimiter,
            has_header=has_header,
            column_count=column_count,
            row_count=row_count,
            columns=columns,
        )

    def _read_sample(self, path: Path) -> list[str]:
        with path.open("r", encoding=self.encoding) as handle:
            return [_strip_terminator(line) for line in islice(handle, self.sample_lines)]

    def _iter_lines(self, path: Path) -> Iterator[str]:
        with path.open("r", encoding=self.encoding) as handle:
            for line in handle:
                yield _strip_terminator(line)
