import logging
from typing import Protocol

from ..errors import GatewayError, GatewayTransportError, SummarizationError
from ..models.document import InputDocument
from ..models.gateway import DocumentBlock, InvokeRequest, InvokeResponse, Message, TextBlock

logger = logging.getLogger(__name__)

HAIKU_MODEL = "anthropic.claude-haiku-4-5-20251001-v1:0"
MAX_TOKENS = 2048

SYSTEM_PROMPT = (
    "You are a data analyst. Summarize datasets clearly and concisely. "
    "Use plain text paragraphs, not markdown."
)

DATASET_PROMPT = """The attached JSON document represents a dataset. Please provide a comprehensive summary that includes:

1. Overview: What this dataset contains and its purpose
2. Structure: The key fields and their types
3. Content Summary: A description of the data values and any patterns
4. Potential Uses: What this dataset could be used for"""


class Gateway(Protocol):
    def invoke(self, request: InvokeRequest) -> InvokeResponse: ...


def build_request(document: InputDocument) -> InvokeRequest:
    """Attach the raw file as a document block, followed by the outline prompt."""
    return InvokeRequest(
        model=HAIKU_MODEL,
        system=SYSTEM_PROMPT,
        max_tokens=MAX_TOKENS,
        messages=[
            Message(
                role="user",
                content=[
                    DocumentBlock.from_bytes(document.name, document.raw),
                    TextBlock(text=DATASET_PROMPT),
                ],
            )
        ],
    )


def _describe_gateway_error(exc: GatewayError) -> str:
    if exc.is_budget_exceeded:
        return f"LLM budget exceeded: {exc.message}"
    if exc.is_model_not_allowed:
        return f"Model not allowed. Available models: {exc.allowed_models}"
    return f"Governor error [{exc.code}]: {exc.message}"


def summarize_document(gateway: Gateway, document: InputDocument) -> InvokeResponse:
    request = build_request(document)
    try:
        response = gateway.invoke(request)
    except GatewayError as exc:
        raise SummarizationError(_describe_gateway_error(exc), path=document.path) from exc
    except GatewayTransportError as exc:
        raise SummarizationError(f"Failed to invoke LLM: {exc}", path=document.path) from exc

    if not response.text().strip():
        logger.warning("Governor returned an empty summary for %s", document.path.name)
    return response
