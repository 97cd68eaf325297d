"""Batch generation: resolve, summarize, render and store each candidate."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable

from classdoc.index import UnresolvableEntityError
from classdoc.models import EntityDescriptor, EntitySummary
from classdoc.renderer import render_markdown
from classdoc.sinks import Sink, SinkWriteError
from classdoc.summarizer import EntitySummarizer

logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    """Outcome of a generation run."""
    generated: list[str] = field(default_factory=list)  # Sink keys written
    skipped: list[str] = field(default_factory=list)  # Candidates that did not resolve
    failed: list[tuple[str, str]] = field(default_factory=list)  # (key, error message)

    @property
    def ok(self) -> bool:
        return not self.failed


def generate_documentation(
    candidates: Iterable[str],
    resolve: Callable[[str], EntityDescriptor | None],
    sink: Sink,
    summarizer: EntitySummarizer | None = None,
    render: Callable[[EntitySummary], str] = render_markdown,
) -> RunReport:
    """Generate one document per resolvable candidate.

    Candidates that do not resolve to an entity are skipped. A failed write is
    recorded in the report and the run carries on with the next candidate.

    Args:
        candidates: Candidate entity identifiers, in processing order
        resolve: Maps an identifier to an entity, or None if there is none
        sink: Destination for rendered documents
        summarizer: Summarizer to use (defaults to one with default links)
        render: Renders a summary to text

    Returns:
        RunReport listing generated keys, skipped candidates and failures
    """
    summarizer = summarizer or EntitySummarizer()
    report = RunReport()

    for identifier in candidates:
        try:
            entity = resolve(identifier)
        except UnresolvableEntityError as e:
            logger.debug(f"Skipping {identifier}: {e}")
            entity = None

        if entity is None:
            report.skipped.append(identifier)
            continue

        key = summarizer.link_resolver.slug_for(entity)
        content = render(summarizer.summarize(entity))

        try:
            sink.put(key, content)
        except (SinkWriteError, OSError) as e:
            logger.warning(f"Could not store documentation for {entity.name}: {e}")
            report.failed.append((key, str(e)))
            continue

        report.generated.append(key)

    return report
