"""Worker sizing for batch verification."""

import multiprocessing
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables


class SystemSpecs:
    """Utility class for determining system specifications and resource allocation."""

    @staticmethod
    def get_num_parallel_processes() -> int:
        """
        Number of worker processes for batch verification.

        CPU count divided by PARALLELISM_DIVISOR (default 2), at least 1.
        """
        parallelism_divisor = max(
            EnvironmentManager.get_int(EnvironmentVariables.PARALLELISM_DIVISOR), 1
        )
        return multiprocessing.cpu_count() // parallelism_divisor or 1
