"""Routers package."""

from . import (
    health,
    trends,
    video_jobs,
    billing,
    virality,
    ux,
)
