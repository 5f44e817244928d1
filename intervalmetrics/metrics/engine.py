"""Metric computation engine.

One call runs every registered computator over a slice and returns
symbol -> value. Computators are instantiated per call, so concurrent
computations over different slices share nothing but the read-only registry.
"""
import logging
import math
from typing import Any, Dict

from ..streams.models import SampleSequence
from .registry import MetricRegistry

logger = logging.getLogger(__name__)


def compute_metrics(
    samples: SampleSequence,
    zones: Any,
    hr_zones: Any,
    registry: MetricRegistry,
) -> Dict[str, float]:
    computators = registry.instantiate(zones, hr_zones, samples.rec_interval)
    for c in computators:
        c.reset()

    for sample in samples:
        for c in computators:
            c.consume(sample)

    computed: Dict[str, float] = {}
    for c in computators:
        c.finalize(computed)
        value = c.value()
        if value is None:
            continue
        value = float(value)
        if not math.isfinite(value):
            logger.debug("[engine][non-finite] symbol=%s value=%s clamped to 0", c.descriptor.symbol, value)
            value = 0.0
        computed[c.descriptor.symbol] = value

    logger.debug("[engine][computed] samples=%d metrics=%d", len(samples), len(computed))
    return computed
