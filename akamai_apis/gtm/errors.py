"""GTM API errors."""

from ..errors import APIError, Problem


class GTMProblem(Problem):
    behavior_name: str = ""
    error_location: str = ""


class Error(APIError):
    """GTM error; adds the behavior name and error location to problem details."""

    problem_model = GTMProblem
