"""Offline stand-in used when no generative backend is configured."""

from agnes.llm.types import LlmMessage, LlmRequest, LlmResponse, LlmUsage


class NullProvider:
    """Deterministic provider that echoes the last message back, clearly labeled."""

    @property
    def name(self) -> str:
        return "null"

    async def generate(self, request: LlmRequest) -> LlmResponse:
        last = request.messages[-1].content if request.messages else ""
        input_tokens = len(request.messages) * 10
        return LlmResponse(
            message=LlmMessage(
                role="assistant",
                content=f"LLM provider not configured. Last user input: {last}",
            ),
            usage=LlmUsage(
                input_tokens=input_tokens,
                output_tokens=12,
                total_tokens=input_tokens + 12,
            ),
        )
