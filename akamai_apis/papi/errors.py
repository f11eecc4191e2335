"""PAPI errors."""

from ..errors import APIError, Problem


class PAPIProblem(Problem):
    behavior_name: str = ""
    error_location: str = ""


class Error(APIError):
    """Property Manager API error."""

    problem_model = PAPIProblem
