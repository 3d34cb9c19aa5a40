"""Registry of university courses, students, enrolments and waitlists."""

__version__ = "0.1.0"
__all__ = ["__version__"]