"""Site assembly: layouts, styles, the builder and project checks."""

from .build import BuildReport, build_site
from .verify import Issue, run_checks

__all__ = ["BuildReport", "build_site", "Issue", "run_checks"]
