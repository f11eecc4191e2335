"""DataStream stream activation."""

from typing import Annotated

import httpx

from .. import validation
from ..client import BaseClient
from ..errors import OperationError
from ..models import APIModel
from ..session import Request
from ..tools import path


class StreamVersionKey(APIModel):
    stream_id: int
    stream_version_id: int


class ActivateStreamResponse(APIModel):
    stream_version_key: StreamVersionKey


DeactivateStreamResponse = ActivateStreamResponse


class ActivationHistoryEntry(APIModel):
    created_by: str = ""
    created_date: str = ""
    is_active: bool = False
    stream_id: int
    stream_version_id: int


class ActivateStreamRequest(validation.RequestModel):
    stream_id: Annotated[int, validation.rules(validation.required)] = 0


class DeactivateStreamRequest(ActivateStreamRequest):
    pass


class GetActivationHistoryRequest(ActivateStreamRequest):
    pass


class ActivateStreamError(OperationError):
    operation = "activate stream"


class DeactivateStreamError(OperationError):
    operation = "deactivate stream"


class GetActivationHistoryError(OperationError):
    operation = "view activation history"


class Activation(BaseClient):
    """DataStream activation API."""

    def activate_stream(self, params: ActivateStreamRequest) -> ActivateStreamResponse:
        """See: https://techdocs.akamai.com/datastream2/v1/reference/put-stream-activate"""
        self.log().debug("ActivateStream")
        self._validate(ActivateStreamError, params)

        request = Request("PUT", path("/datastream-config-api/v1/log/streams/{}/activate", params.stream_id))
        return self._call(
            ActivateStreamError,
            request,
            expect=(httpx.codes.ACCEPTED,),
            result=ActivateStreamResponse,
        )

    def deactivate_stream(self, params: DeactivateStreamRequest) -> DeactivateStreamResponse:
        """See: https://techdocs.akamai.com/datastream2/v1/reference/put-stream-deactivate"""
        self.log().debug("DeactivateStream")
        self._validate(DeactivateStreamError, params)

        request = Request("PUT", path("/datastream-config-api/v1/log/streams/{}/deactivate", params.stream_id))
        return self._call(
            DeactivateStreamError,
            request,
            expect=(httpx.codes.ACCEPTED,),
            result=DeactivateStreamResponse,
        )

    def get_activation_history(self, params: GetActivationHistoryRequest) -> list[ActivationHistoryEntry]:
        """See: https://techdocs.akamai.com/datastream2/v1/reference/get-stream-activation-history"""
        self.log().debug("GetActivationHistory")
        self._validate(GetActivationHistoryError, params)

        request = Request("GET", path("/datastream-config-api/v1/log/streams/{}/activationHistory", params.stream_id))
        result = self._call(GetActivationHistoryError, request, result=list[ActivationHistoryEntry])
        return result if result is not None else []
