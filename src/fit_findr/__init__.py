"""FitFindr: search, filter and compare gyms from a fixed catalog."""

__version__ = "0.1.0"
