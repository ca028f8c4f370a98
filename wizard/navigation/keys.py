from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WizardSessionKeys:
    """Namespaced session-state keys for one wizard instance."""

    wizard_id: str

    @property
    def prefix(self) -> str:
        return f"wiz:{self.wizard_id}:"

    def namespace(self, key: str) -> str:
        return f"{self.prefix}{key}"

    @property
    def controller(self) -> str:
        return self.namespace("controller")

    @property
    def last_errors(self) -> str:
        return self.namespace("last_errors")

    @property
    def submission(self) -> str:
        return self.namespace("submission")

    def widget(self, identifier: str) -> str:
        """Return the widget key for a field id or radio group name."""

        return self.namespace(f"field:{identifier}")
