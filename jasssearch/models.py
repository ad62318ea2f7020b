"""Data models for jasssearch."""

from dataclasses import dataclass


UNKNOWN_NAME = "Unknown Function"
NOTHING = "nothing"


@dataclass(frozen=True)
class ApiEntry:
    """A documented native extracted from a declaration file."""

    name: str
    signature: str
    description: str  # Raw doc comment plus declaration, verbatim

    parameters: str = NOTHING
    return_type: str = NOTHING

    @classmethod
    def build(cls, name: str, parameters: str, return_type: str, description: str) -> "ApiEntry":
        """Create an entry, deriving the signature from its parts.

        Empty parts fall back to their sentinels so the signature always has
        the ``name(parameters): returnType`` shape.
        """
        name = name or UNKNOWN_NAME
        parameters = parameters.strip() if parameters else ""
        parameters = parameters or NOTHING
        return_type = return_type or NOTHING
        return cls(
            name=name,
            signature=f"{name}({parameters}): {return_type}",
            description=description,
            parameters=parameters,
            return_type=return_type,
        )

    @property
    def summary(self) -> str:
        """First line of prose from the doc comment, or an empty string."""
        for line in self.description.split("\n"):
            text = line.strip()
            if text.startswith("native"):
                break
            text = text.lstrip("/*").rstrip("*/").strip()
            if text and not text.startswith("@"):
                return text
        return ""

    def __str__(self) -> str:
        return self.signature
