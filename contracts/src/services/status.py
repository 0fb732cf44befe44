"""
Aggregate status of a build or release from its step logs.
"""

import logging
from typing import List

from contracts.src.models.build_log import BuildLogStep
from contracts.src.models.enums import LogStatus, Status

logger = logging.getLogger(__name__)

def get_aggregated_status(steps: List[BuildLogStep]) -> Status:
    """
    Collapse step logs into one status.

    Steps must be in chronological order: the last step seen for a stage is
    the one that counts, so a retry that succeeded overrides an earlier
    failure. Any canceled step cancels the whole run. No steps at all gives
    unknown rather than a trivial success.
    """
    if not steps:
        return Status.UNKNOWN

    # last status per stage is leading, to take retries into account
    status_per_stage = {}
    for step in steps:
        if step.status == LogStatus.CANCELED:
            return Status.CANCELED
        status_per_stage[step.step] = step.status

    latest = status_per_stage.values()

    if LogStatus.FAILED in latest:
        return Status.FAILED

    if LogStatus.UNKNOWN in latest:
        unknown_stages = [name for name, s in status_per_stage.items() if s == LogStatus.UNKNOWN]
        logger.warning(f"Stages with unknown status: {', '.join(unknown_stages)}")
        return Status.UNKNOWN

    # pending, running and skipped stages don't block success
    return Status.SUCCEEDED

def has_succeeded_status(steps: List[BuildLogStep]) -> bool:
    return get_aggregated_status(steps) == Status.SUCCEEDED
