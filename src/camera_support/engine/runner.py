"""Ordered reconciliation pipeline runner.

This module chains the source steps into a single deterministic pipeline,
then aggregates statistics and renders the report.

Pipeline order (also the precedence rule):
    1. rawspeed       cameras.xml             primary decoder, formats, aliases
    2. libraw         imageio_libraw.c        secondary decoder (optional)
    3. wb_presets     wb_presets.json         white-balance presets
    4. noise_profiles noiseprofiles.json      noise profiles
    5. rawspeed_dng   rawspeed-dng.csv        primary decoder overlay
"""

import sys
import time
import traceback
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from functools import partial

from camera_support.audit.logger import AuditLogger
from camera_support.engine.config import ConfigError, PipelineConfig, PipelineResult
from camera_support.extract.base import ExtractError, ExtractorFn
from camera_support.extract.ingestion import read_source
from camera_support.extract.libraw import extract_libraw
from camera_support.extract.overlay import extract_overlay
from camera_support.extract.presets import extract_noise_profiles, extract_wb_presets
from camera_support.extract.rawspeed import extract_rawspeed
from camera_support.merge.rules import (
    MergeError,
    PresetDataset,
    merge_libraw,
    merge_overlay,
    merge_presets,
    merge_rawspeed,
)
from camera_support.models import CameraFact, Registry
from camera_support.report.render import render_report
from camera_support.report.stats import generate_stats
from camera_support.utils import calculate_payload_sha256

MergeFn = Callable[[Registry, Iterable[CameraFact]], Registry]

PIPELINE_ORDER = ("rawspeed", "libraw", "wb_presets", "noise_profiles", "rawspeed_dng")
OPTIONAL_SOURCES = frozenset({"libraw"})


@dataclass(frozen=True)
class PipelineStep:
    """One source folded into the registry.

    Attributes
    ----------
    source : str
        SourceConfig field naming the payload.
    extract : ExtractorFn
        Payload to facts.
    merge : MergeFn
        Facts into registry.
    """

    source: str
    extract: ExtractorFn
    merge: MergeFn


def build_steps(config: PipelineConfig) -> list[PipelineStep]:
    """Build the pipeline steps in precedence order.

    Parameters
    ----------
    config : PipelineConfig
        Supplies the options the rawspeed step depends on.

    Returns
    -------
    list[PipelineStep]
        Steps ordered as PIPELINE_ORDER.
    """
    return [
        PipelineStep(
            "rawspeed",
            extract_rawspeed,
            partial(
                merge_rawspeed,
                include_unsupported=config.include_unsupported,
                default_format=config.default_format,
            ),
        ),
        PipelineStep("libraw", extract_libraw, merge_libraw),
        PipelineStep(
            "wb_presets",
            extract_wb_presets,
            partial(merge_presets, dataset=PresetDataset.WB_PRESETS),
        ),
        PipelineStep(
            "noise_profiles",
            extract_noise_profiles,
            partial(merge_presets, dataset=PresetDataset.NOISE_PROFILES),
        ),
        PipelineStep("rawspeed_dng", extract_overlay, merge_overlay),
    ]


def _load_payload(
    source: str,
    config: PipelineConfig,
    payloads: Mapping[str, bytes] | None,
    logger: AuditLogger | None,
) -> bytes | None:
    """Return the payload for ``source``, or None if the step is disabled.

    With ``payloads`` given, ingestion is bypassed entirely: a missing
    optional source disables its step and a missing required source is a
    configuration error.
    """
    if payloads is not None:
        if source in payloads:
            return payloads[source]
        if source in OPTIONAL_SOURCES:
            return None
        raise ConfigError(f"No payload provided for source '{source}'")

    location: str = getattr(config.sources, source)
    if not location:
        if source in OPTIONAL_SOURCES:
            return None
        raise ConfigError(f"No location configured for source '{source}'")

    payload = read_source(location)
    if logger:
        logger.source_loaded(
            location=location,
            sha256=calculate_payload_sha256(payload),
            bytes_read=len(payload),
            stage=source,
        )
    return payload


def _run_step(
    step: PipelineStep,
    registry: Registry,
    config: PipelineConfig,
    payloads: Mapping[str, bytes] | None,
    logger: AuditLogger | None,
) -> Registry:
    """Extract one source and fold it into the registry."""
    start = time.perf_counter()
    if logger:
        logger.stage_started(step.source)

    payload = _load_payload(step.source, config, payloads, logger)
    if payload is None:
        if logger:
            logger.event("stage_skipped", stage=step.source)
        return registry

    cameras_before = len(registry)
    facts = step.extract(payload)
    registry = step.merge(registry, facts)

    if logger:
        logger.stage_finished(
            step.source,
            duration_seconds=time.perf_counter() - start,
            counters={
                "facts": len(facts),
                "cameras_created": len(registry) - cameras_before,
                "cameras_total": len(registry),
            },
        )
    return registry


def run_pipeline(
    config: PipelineConfig | None = None,
    *,
    payloads: Mapping[str, bytes] | None = None,
    logger: AuditLogger | None = None,
) -> PipelineResult:
    """Reconcile all sources, aggregate statistics and render the report.

    Parameters
    ----------
    config : PipelineConfig | None, optional
        Pipeline configuration. If None, uses defaults.
    payloads : Mapping[str, bytes] | None, optional
        Source payloads keyed by SourceConfig field name. When given,
        nothing is fetched.
    logger : AuditLogger | None, optional
        Audit logger for tracking. If None, no logging.

    Returns
    -------
    PipelineResult
        Registry, statistics and rendered output. On an extraction, merge or
        configuration error the run stops at the failing step and the result
        carries ``success=False`` and the error message.

    Examples
    --------
        >>> from camera_support.engine import PipelineConfig, run_pipeline
        >>> result = run_pipeline(PipelineConfig())
        >>> if result.success:
        ...     print(result.output)
    """
    if config is None:
        config = PipelineConfig()

    start = time.perf_counter()
    if logger:
        logger.run_started(command=sys.argv, parameters=config.to_dict())

    registry: Registry = {}
    try:
        for step in build_steps(config):
            registry = _run_step(step, registry, config, payloads, logger)

        stats = generate_stats(
            registry,
            include_unknown=config.include_unknown,
            include_unsupported=config.include_unsupported,
        )
        output = render_report(registry, stats, config)

    except (ExtractError, MergeError, ConfigError) as e:
        error_msg = f"{type(e).__name__}: {e}"
        if logger:
            logger.error(
                exception_class=type(e).__name__,
                message=str(e),
                source=getattr(e, "source", None),
                traceback=traceback.format_exc(),
            )
            logger.run_finished("failed", time.perf_counter() - start, cameras=len(registry))
        return PipelineResult(success=False, registry=registry, error_message=error_msg)

    if logger:
        logger.set_stage(None)
        logger.run_finished("success", time.perf_counter() - start, cameras=len(registry))

    return PipelineResult(success=True, registry=registry, stats=stats, output=output)
