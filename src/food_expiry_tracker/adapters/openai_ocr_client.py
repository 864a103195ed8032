"""OpenAI Responses API client for receipt OCR."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from food_expiry_tracker.services.receipts import OcrClient


@dataclass
class OpenAIOcrClient(OcrClient):
    """OCR client backed by an OpenAI vision model."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIOcrClient":
        """Create an OpenAI OCR client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def extract(
        self,
        *,
        model: str,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Call OpenAI Responses API with structured outputs."""
        response = await self.client.responses.create(
            model=model,
            input=[
                {
                    "role": "user",
                    "content": [
                        {"type": "input_text", "text": prompt},
                        {"type": "input_image", "image_url": image_data_url},
                    ],
                }
            ],
            text={
                "format": {
                    "type": "json_schema",
                    "name": "receipt_lines",
                    "strict": True,
                    "schema": schema,
                }
            },
            store=False,
        )
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(output_text)

    async def close(self) -> None:
        """Close the underlying OpenAI client."""
        await self.client.close()
