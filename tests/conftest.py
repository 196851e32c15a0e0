"""Global pytest configuration for DATAMOUNT.

Registers Hypothesis profiles; select one with ``HYPOTHESIS_PROFILE``
(default ``dev``).
"""

import os

from hypothesis import settings

settings.register_profile("dev", max_examples=100)
settings.register_profile("ci", max_examples=1000, deadline=None)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))
