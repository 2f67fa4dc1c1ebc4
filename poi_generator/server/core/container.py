# --------------------------------
# DI container
# --------------------------------

from functools import lru_cache

from poi_generator.config import Settings, get_settings
from poi_generator.llm.openai_chat import OpenAIChatLLMClient
from poi_generator.runtime.generator import POIGenerator


class Container:
    def __init__(self, settings: Settings | None = None, generator: POIGenerator | None = None):
        self._generator = generator or POIGenerator(
            llm=OpenAIChatLLMClient.from_settings(settings or get_settings())
        )

    @property
    def generator(self) -> POIGenerator:
        return self._generator


@lru_cache
def get_container() -> Container:
    return Container()
