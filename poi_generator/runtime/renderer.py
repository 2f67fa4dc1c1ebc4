"""Prompt renderer (strict placeholder substitution).

Templates use `${name}` placeholders. Values are inserted verbatim, so a `$`
inside a location name is never expanded.
"""

from __future__ import annotations

from string import Template


class PromptRenderer:
    """Render prompt templates with strict placeholder rules."""

    @staticmethod
    def placeholders(template: str) -> set[str]:
        """Names of the `${...}` placeholders a template declares."""
        return {
            match.group('named') or match.group('braced')
            for match in Template.pattern.finditer(template)
            if match.group('named') or match.group('braced')
        }

    def check(self, template: str, required: set[str]) -> None:
        """Raise ValueError unless the template declares exactly `required`."""
        found = self.placeholders(template)
        if found != required:
            raise ValueError(
                f'Prompt placeholders {sorted(found)} do not match expected {sorted(required)}'
            )

    def render(self, template: str, variables: dict[str, str]) -> str:
        """Render a prompt template.

        Raises:
            ValueError: If any required template variables are missing.
        """
        try:
            return Template(template).substitute(variables)
        except KeyError as exc:
            raise ValueError(f'Missing prompt variable: {exc}') from exc
