"""Data models for what the generator hands back to the host."""

from dataclasses import dataclass, field

from resxgen.diagnostic import Diagnostic


@dataclass(frozen=True)
class GeneratedArtifact:
    """Generated source text for one resource group."""

    hint_name: str  # e.g. Strings.resx.g.cs
    text: str


@dataclass
class GeneratorOutput:
    """Artifacts and diagnostics of one generator run."""

    artifacts: list[GeneratedArtifact] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def artifact(self, hint_name: str) -> GeneratedArtifact | None:
        """Return the artifact with the given name, if any."""
        for a in self.artifacts:
            if a.hint_name == hint_name:
                return a
        return None
