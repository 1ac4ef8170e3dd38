"""Profili Hypothesis condivisi. Selezione con HYPOTHESIS_PROFILE=ci."""

import os

from hypothesis import HealthCheck, settings


settings.register_profile("dev", max_examples=200)
settings.register_profile(
    "ci",
    max_examples=2000,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
