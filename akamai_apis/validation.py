"""
Field validation for request models.

Request types are pydantic models whose fields carry rules::

    class GetActivationRequest(RequestModel):
        edge_worker_id: Annotated[int, rules(required)] = 0
        activation_id: Annotated[int, rules(required)] = 0

Rules that depend on another field are ``field_validator`` hooks that call
``enforce`` with the already validated ``info.data``.

Rules only run when ``validate`` re-validates a model with the check context,
so requests and bodies can be built freely (and response payloads decoded
with the same models) while the operation that sends them still fails before
any I/O. Every failing field is reported, keyed by its dotted path.
"""

from typing import Any, Callable, Mapping

from pydantic import AfterValidator, BaseModel, ConfigDict, ValidationError, ValidationInfo
from pydantic_core import PydanticCustomError

Rule = Callable[[Any], "str | None"]

BLANK_MESSAGE = "cannot be blank"
INVALID_MESSAGE = "must be a valid value"

CHECK_CONTEXT = "check_rules"


class ValidationErrors(Exception):
    """Aggregated per-field validation failure."""

    def __init__(self, errors: Mapping[str, str]):
        self.errors = dict(sorted(errors.items()))
        super().__init__(str(self))

    def __str__(self) -> str:
        return "; ".join(f"{field}: {message}" for field, message in self.errors.items()) + "."

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "ValidationErrors":
        """Key every error by its dotted location, keeping the first message per field."""
        errors: dict[str, str] = {}
        for error in exc.errors():
            errors.setdefault(".".join(str(part) for part in error["loc"]), error["msg"])
        return cls(errors)


class RequestModel(BaseModel):
    """Parameters of a single operation."""

    model_config = ConfigDict(loc_by_alias=False)


def is_blank(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set)):
        return len(value) == 0
    if isinstance(value, (int, float)):
        return value == 0
    return False


def required(value: Any) -> str | None:
    return BLANK_MESSAGE if is_blank(value) else None


def one_of(*allowed: Any, message: str | None = None) -> Rule:
    """Value must be one of ``allowed``; blank values are left to ``required``."""

    def rule(value: Any) -> str | None:
        if is_blank(value) or value in allowed:
            return None
        return message or INVALID_MESSAGE

    return rule


def check(value: Any, *field_rules: Rule) -> str | None:
    """Return the first failing rule's message, or None."""
    for rule in field_rules:
        message = rule(value)
        if message:
            return message
    return None


def checking(info: ValidationInfo) -> bool:
    return bool(info.context and info.context.get(CHECK_CONTEXT))


def enforce(info: ValidationInfo, value: Any, *field_rules: Rule) -> Any:
    """Fail the field with the first failing rule while a model is being checked."""
    if checking(info):
        message = check(value, *field_rules)
        if message:
            raise PydanticCustomError("rule", message)
    return value


def rules(*field_rules: Rule) -> AfterValidator:
    """Field annotation running ``field_rules`` in order."""

    def apply(value: Any, info: ValidationInfo) -> Any:
        return enforce(info, value, *field_rules)

    return AfterValidator(apply)


def validate(model: BaseModel) -> None:
    """Re-validate ``model`` with its rules enabled, raising ValidationErrors on failure."""
    try:
        type(model).model_validate(model.model_dump(), context={CHECK_CONTEXT: True})
    except ValidationError as exc:
        raise ValidationErrors.from_pydantic(exc) from exc


def require(**fields: Any) -> None:
    """Check that scalar operation arguments are not blank."""
    errors = {name: BLANK_MESSAGE for name, value in fields.items() if is_blank(value)}
    if errors:
        raise ValidationErrors(errors)
