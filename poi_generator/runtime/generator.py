"""Tourist attraction generation: prompt -> LLM -> parsed POI records.

One call to `generate_pois` makes exactly one model request. Failures from the
model client (transport errors, non-2xx statuses, malformed payloads) are not
caught here; the caller gets the exception and no partial record list.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict
from typing import Any

from poi_generator.llm.base import LLMClient, LLMRequest
from poi_generator.observability.tracing import log_event, new_trace_id, traced
from poi_generator.prompts import load_prompt
from poi_generator.runtime.parsing import parse_poi_lines
from poi_generator.runtime.renderer import PromptRenderer
from poi_generator.schemas import POIRecord

PROMPT_MODULE = 'tourist_attractions'
TAG_SEPARATOR = ', '
PROMPT_VARIABLES = {'location', 'tags'}


class POIGenerator:
    """Builds the attractions prompt, calls the model and parses its reply."""

    def __init__(
        self,
        *,
        llm: LLMClient,
        renderer: PromptRenderer | None = None,
        prompt_version: str = 'v1',
    ) -> None:
        self._llm = llm
        self._renderer = renderer or PromptRenderer()
        self._template = load_prompt(PROMPT_MODULE, prompt_version)
        self._renderer.check(self._template, PROMPT_VARIABLES)
        self._prompt_version = prompt_version

    def build_prompt(self, location: str, tags: Sequence[str]) -> str:
        """Render the attractions prompt.

        Tags keep their order. An empty tag list renders as "...that include ."

        Examples:
            >>> from poi_generator.llm import MockLLMClient
            >>> POIGenerator(llm=MockLLMClient()).build_prompt('Paris', ['museums', 'food'])
            'Give me a list of tourist attractions in Paris that include museums, food.'
        """
        return self._renderer.render(
            self._template,
            {'location': location, 'tags': TAG_SEPARATOR.join(tags)},
        )

    async def generate_pois(
        self,
        location: str,
        tags: Sequence[str],
        *,
        metadata: dict[str, Any] | None = None,
    ) -> list[POIRecord]:
        """Ask the model for attractions in `location` and parse the reply.

        Returns:
            One record per non-blank line of the completion, in line order.
        """
        meta = metadata or {}
        trace_id = meta.get('trace_id') or new_trace_id()
        prompt = self.build_prompt(location, tags)
        log_event('pois.start', trace_id=trace_id, location=location, tags=list(tags))

        with traced('llm.chat_completion', trace_id=trace_id, prompt_version=self._prompt_version) as span:
            llm_resp = await self._llm.generate(
                LLMRequest(
                    prompt=prompt,
                    metadata={
                        **meta,
                        'trace_id': trace_id,
                        'prompt_module': PROMPT_MODULE,
                        'prompt_version': self._prompt_version,
                    },
                )
            )
            span.attributes['usage'] = asdict(llm_resp.usage)

        records = parse_poi_lines(llm_resp.output_text)
        log_event('pois.ok', trace_id=trace_id, count=len(records))
        return records
