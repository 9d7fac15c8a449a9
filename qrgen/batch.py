"""Batch generation over labeled payloads."""

import io
import re
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping, Sequence, Union

from .errors import IoFailureError
from .generation_config import GenerationConfig
from .interfaces import ILogSink, ITabularSource
from .pipeline import GeneratorPipeline


@dataclass(frozen=True)
class BatchItem:
    """One labeled payload. Only the label is sanitized."""
    label: str
    payload: str


@dataclass(frozen=True)
class Success:
    path: Path


@dataclass(frozen=True)
class Failure:
    reason: str
    kind: str = "Exception"


@dataclass(frozen=True)
class BatchEntry:
    label: str
    outcome: Union[Success, Failure]

    @property
    def ok(self) -> bool:
        return isinstance(self.outcome, Success)


@dataclass
class BatchReport:
    """Ordered per-item outcomes of one batch run."""
    output_dir: Path
    entries: list[BatchEntry] = field(default_factory=list)

    @property
    def total_success(self) -> int:
        return sum(1 for entry in self.entries if entry.ok)

    @property
    def failures(self) -> list[BatchEntry]:
        return [entry for entry in self.entries if not entry.ok]


def sanitize_label(label: str, position: int) -> str:
    """Replace non-alphanumerics with '_'; empty labels get qrcode_<n>."""
    name = re.sub(r"[^a-zA-Z0-9]", "_", label)
    return name or f"qrcode_{position}"


def archive_report(report: BatchReport) -> bytes:
    """Zip every successfully written file of a report."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as archive:
        for entry in report.entries:
            if entry.ok:
                archive.write(entry.outcome.path, entry.outcome.path.name)
    return buf.getvalue()


class BatchProcessor:
    """Renders items in input order, isolating per-item failures."""

    def __init__(
        self,
        pipeline: GeneratorPipeline,
        logger: ILogSink,
        base_config: GenerationConfig = GenerationConfig()
    ):
        self.pipeline = pipeline
        self.logger = logger
        self.base_config = base_config

    def _prepare_dir(self, output_dir: Path) -> None:
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise IoFailureError(f"cannot create {output_dir}: {e}") from e

    def _process(
        self, item: BatchItem, position: int, output_dir: Path
    ) -> BatchEntry:
        name = sanitize_label(item.label, position)
        ext = self.base_config.output_format.value
        path = output_dir / f"{name}.{ext}"

        try:
            result = self.pipeline.render(item.payload, self.base_config)
            result.to_file(path)
        except Exception as e:
            self.logger.log("error", f"Batch item '{item.label}' failed: {e}")
            return BatchEntry(
                item.label, Failure(reason=str(e), kind=type(e).__name__)
            )

        self.logger.log("info", f"Generated {path}")
        return BatchEntry(item.label, Success(path=path))

    def run_batch(
        self,
        items: Iterable[BatchItem],
        output_dir: Union[str, Path]
    ) -> BatchReport:
        """Render every item into output_dir; never aborts on one item."""
        output_dir = Path(output_dir)
        self._prepare_dir(output_dir)

        report = BatchReport(output_dir=output_dir)
        for position, item in enumerate(items, 1):
            report.entries.append(self._process(item, position, output_dir))

        self.logger.log(
            "info",
            f"Batch done: {report.total_success}/{len(report.entries)} "
            f"generated in {output_dir}"
        )
        return report

    def run_rows(
        self,
        rows: Iterable[Sequence[str]],
        output_dir: Union[str, Path]
    ) -> BatchReport:
        """Batch from tabular rows; rows under two columns are skipped."""
        def _items():
            for row in rows:
                if len(row) < 2:
                    self.logger.log("debug", f"Skipping short row: {row}")
                    continue
                yield BatchItem(label=row[0], payload=row[1])

        return self.run_batch(_items(), output_dir)

    def run_source(
        self, source: ITabularSource, output_dir: Union[str, Path]
    ) -> BatchReport:
        """Batch from a tabular source such as a CSV adapter."""
        return self.run_rows(source.rows(), output_dir)

    def run_mapping(
        self,
        mapping: Mapping[str, str],
        output_dir: Union[str, Path]
    ) -> BatchReport:
        """Batch from an ordered label -> payload mapping."""
        items = [BatchItem(label, text) for label, text in mapping.items()]
        return self.run_batch(items, output_dir)
