"""Shell variables: the environment list, the export list and the status."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

STATUS_NAME = "?"


def split_entry(entry: str) -> tuple[str, str]:
    """Split ``NAME=value`` into name and value.

    The value stops at the first newline. An entry without ``=`` has an
    empty value.
    """
    name, _, value = entry.partition("=")
    return name, value.split("\n", 1)[0]


@dataclass
class EnvVar:
    """One shell variable.

    ``value`` is None for a variable that has no value; ``bare`` marks a name
    that was exported without ``=``.
    """

    name: str
    value: str | None = None
    bare: bool = False

    def render(self) -> str:
        return f"{self.name}={self.value or ''}"


@dataclass
class Environment:
    """The variables the shell knows about.

    ``variables`` is what ``env`` shows and what commands see; ``exports`` is
    what ``export`` lists. Both carry the ``?`` status entry. ``changed`` is
    set whenever the variable set is edited so that the command environment
    can be rebuilt.
    """

    variables: list[EnvVar] = field(default_factory=list)
    exports: list[EnvVar] = field(default_factory=list)
    changed: bool = False

    @classmethod
    def from_entries(cls, entries: Iterable[str]) -> Environment:
        """Build an environment from ``NAME=value`` strings."""
        pairs = [split_entry(entry) for entry in entries]

        def build() -> list[EnvVar]:
            items = [EnvVar(name, value) for name, value in pairs]
            items.append(EnvVar(STATUS_NAME, "0"))
            return items

        return cls(variables=build(), exports=build())

    def get(self, name: str) -> str | None:
        """Return the value of the first variable called ``name``, or None."""
        for var in self.variables:
            if var.name == name:
                return var.value
        return None

    def set_status(self, code: int) -> None:
        """Record ``code`` as the last exit status."""
        self.set_status_text(str(code))

    def set_status_text(self, text: str) -> None:
        """Record ``text`` verbatim as the last exit status."""
        for var in self.variables:
            if var.name == STATUS_NAME:
                var.value = text
                return

    def status(self) -> str:
        """Return the last exit status as text."""
        value = self.get(STATUS_NAME)
        return value if value is not None else "0"

    def to_envp(self) -> list[str]:
        """Return the ``NAME=value`` list handed to started commands.

        Variables are taken up to the status entry, which is always passed
        as ``?=0``.
        """
        envp = []
        for var in self.variables:
            if var.name == STATUS_NAME:
                break
            envp.append(var.render())
        envp.append(f"{STATUS_NAME}=0")
        return envp