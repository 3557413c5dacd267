"""docker-report — container runtime inventory report.

Lists containers and images through the runtime CLI, renders aligned
console tables plus a summary, and persists a full plain-text report.
"""

from docker_report.version import __version__

__all__: list[str] = ["__version__"]
