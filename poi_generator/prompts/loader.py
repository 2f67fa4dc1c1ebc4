"""Prompt loader and version selector."""

from __future__ import annotations

from pathlib import Path

from poi_generator.errors import POIGeneratorError

PROMPTS_DIR = Path(__file__).resolve().parent


class PromptNotFoundError(POIGeneratorError):
    pass


def load_prompt(module: str, version: str) -> str:
    """Load a prompt template by module and version.

    Args:
        module: Prompt module name (e.g. "tourist_attractions").
        version: Version folder name (e.g. "v1").

    Returns:
        Prompt text without the trailing newline of the file.

    Raises:
        PromptNotFoundError: If the prompt file is missing.
    """
    prompt_path = PROMPTS_DIR / module / version / 'prompt.md'
    if not prompt_path.exists():
        raise PromptNotFoundError(f'Prompt not found: {module}/{version}')
    return prompt_path.read_text(encoding='utf-8').rstrip('\n')
