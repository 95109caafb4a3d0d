"""Output of a utility resolver for one class."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Declaration:
    """A single ``name: value`` pair, optionally ``!important``."""

    name: str
    value: str
    important: bool = False

    def __str__(self) -> str:
        suffix = " !important" if self.important else ""
        return f"{self.name}: {self.value}{suffix}"


@dataclass(frozen=True)
class CompositionPart:
    """A partial contribution that must be merged with sibling classes.

    ``key`` names the composition context (``"gradient"``), ``slot`` the
    field this class fills (``from``, ``via``, ``to`` or ``direction``) and
    ``function`` the CSS function a direction selects.
    """

    key: str
    slot: str
    value: str
    function: str = ""


@dataclass(frozen=True)
class UtilityResolution:
    """Declarations produced for one class.

    A resolution always carries something: either declarations or a
    composition part.  Resolvers signal "not mine" by returning ``None``.
    ``keyframes`` names the theme keyframes the declarations reference.
    """

    properties: tuple[Declaration, ...] = ()
    composition: CompositionPart | None = None
    keyframes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.properties and self.composition is None:
            raise ValueError(
                "UtilityResolution needs declarations or a composition part; "
                "return None for unrecognized classes"
            )

    @property
    def composition_key(self) -> str | None:
        return self.composition.key if self.composition else None

    def with_important(self) -> UtilityResolution:
        return replace(
            self,
            properties=tuple(replace(p, important=True) for p in self.properties),
        )
