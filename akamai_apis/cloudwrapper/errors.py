"""Cloud Wrapper API errors."""

from typing import Any

from pydantic import Field

from ..errors import APIError, Problem
from ..models import APIModel


class ErrorItem(APIModel):
    """One entry of the ``errors`` list of a Cloud Wrapper problem."""

    type: str = ""
    title: str = ""
    detail: str = ""
    illegal_value: Any = None
    illegal_parameter: str = ""


class CloudWrapperProblem(Problem):
    errors: list[ErrorItem] = Field(default_factory=list)


class Error(APIError):
    """Cloud Wrapper error; ``errors`` lists the individual rejected parameters."""

    problem_model = CloudWrapperProblem
