"""Thin boto3 wrapper around the LLM Governor Lambda function.

The governor owns authentication, model allow-listing, budget accounting and
retries. This client only ships one request and maps the reply (or the
governor's error object) back into our types.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from ..config import ProcessorConfig
from ..errors import GatewayError, GatewayTransportError
from ..models.gateway import GovernorErrorBody, InvokeRequest, InvokeResponse

logger = logging.getLogger(__name__)

# Lambda's own ceiling; the governor decides when to give up.
_READ_TIMEOUT_SECONDS = 900


class GovernorClient:
    def __init__(
        self,
        function_name: str,
        execution_run_id: str = "",
        region_name: Optional[str] = None,
        lambda_client: Any = None,
    ) -> None:
        self.function_name = function_name
        self.execution_run_id = execution_run_id
        self._region_name = region_name
        self._lambda = lambda_client

    @classmethod
    def from_config(cls, config: ProcessorConfig) -> "GovernorClient":
        return cls(
            function_name=config.governor_function,
            execution_run_id=config.execution_run_id,
            region_name=config.aws_region,
        )

    @property
    def available(self) -> bool:
        return bool(self.function_name)

    def _client(self) -> Any:
        if self._lambda is None:
            self._lambda = boto3.client(
                "lambda",
                region_name=self._region_name,
                config=Config(
                    read_timeout=_READ_TIMEOUT_SECONDS,
                    retries={"total_max_attempts": 1},
                ),
            )
        return self._lambda

    def _payload(self, request: InvokeRequest) -> bytes:
        body = request.model_dump(by_alias=True)
        body["executionRunId"] = self.execution_run_id
        return json.dumps(body).encode("utf-8")

    def invoke(self, request: InvokeRequest) -> InvokeResponse:
        try:
            response = self._client().invoke(
                FunctionName=self.function_name,
                InvocationType="RequestResponse",
                Payload=self._payload(request),
            )
            body = json.loads(response["Payload"].read())
        except (BotoCoreError, ClientError) as exc:
            raise GatewayTransportError(str(exc)) from exc
        except ValueError as exc:
            raise GatewayTransportError(f"unreadable governor response: {exc}") from exc

        if response.get("FunctionError"):
            detail = body.get("errorMessage", "") if isinstance(body, dict) else str(body)
            raise GatewayError(code="FUNCTION_ERROR", message=detail or response["FunctionError"])

        if not isinstance(body, dict):
            raise GatewayTransportError(f"unexpected governor response: {body!r}")

        if body.get("error"):
            raw_error = body["error"]
            if isinstance(raw_error, str):
                raw_error = {"message": raw_error}
            error = GovernorErrorBody.model_validate(raw_error)
            logger.warning("Governor rejected request [%s]: %s", error.code, error.message)
            raise GatewayError(
                code=error.code,
                message=error.message,
                allowed_models=error.allowed_models,
            )

        try:
            return InvokeResponse.model_validate(body)
        except ValidationError as exc:
            raise GatewayTransportError(f"unexpected governor response: {exc}") from exc
