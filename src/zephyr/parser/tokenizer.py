"""Tokenizer for variant-prefixed utility classes.

Grammar, informally::

    class    := (variant ":")* base
    base     := ["!"] ["-"] name ["-" value] ["/" opacity] ["!"]
    value    := scale | "[" arbitrary "]" | digits "/" digits

``:`` only separates variants outside brackets and parentheses, so
``w-[calc(50%+1px)]`` and ``bg-[url(a:b)]`` are never split.
"""

from __future__ import annotations

from dataclasses import dataclass

from zephyr.errors import ClassParseError
from zephyr.model.diagnostic import Diagnostic, DiagnosticKind
from zephyr.model.token import NO_VALUE, ClassToken, ValueSpec, VariantSpec
from zephyr.parser.variants import VariantTable
from zephyr.values.arbitrary import MalformedValueError, validate_arbitrary

__all__ = ["ParsedClass", "parse_class", "split_variants"]

# Denominators that make "n/d" a fraction rather than an opacity modifier.
FRACTION_DENOMINATORS = frozenset({2, 3, 4, 5, 6, 12})

_OPENERS = {"[": "]", "(": ")"}
_CLOSERS = {"]": "[", ")": "("}


@dataclass(frozen=True)
class ParsedClass:
    """A token plus the non-fatal diagnostics found while parsing it."""

    token: ClassToken
    diagnostics: tuple[Diagnostic, ...] = ()


def _malformed(raw: str, message: str, fix: str | None = None) -> ClassParseError:
    return ClassParseError(
        Diagnostic.of(DiagnosticKind.MALFORMED_CLASS, message, token=raw, fix=fix)
    )


def split_variants(raw: str) -> list[str]:
    """Split *raw* on ``:`` at bracket depth 0.

    Raises :class:`ClassParseError` when brackets are unbalanced.
    """
    segments: list[str] = []
    stack: list[str] = []
    start = 0
    for i, ch in enumerate(raw):
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _CLOSERS:
            if not stack or stack[-1] != _CLOSERS[ch]:
                raise _malformed(raw, f"Unbalanced {ch!r} at column {i + 1} in {raw!r}")
            stack.pop()
        elif ch == ":" and not stack:
            segments.append(raw[start:i])
            start = i + 1
    if stack:
        raise _malformed(raw, f"Unclosed {stack[-1]!r} in {raw!r}")
    segments.append(raw[start:])
    return segments


def _split_fraction(head: str, modifier: str) -> tuple[str, ValueSpec] | None:
    name, sep, numerator = head.rpartition("-")
    if not sep or not name or not numerator.isdigit() or not modifier.isdigit():
        return None
    n, d = int(numerator), int(modifier)
    if 0 < n < d and d in FRACTION_DENOMINATORS:
        return name, ValueSpec.fraction(n, d)
    return None


def parse_class(raw: str, variants: VariantTable) -> ParsedClass:
    """Tokenize one class string.

    Unknown variants and bad opacity modifiers are reported and skipped;
    a missing base, unbalanced brackets or an invalid arbitrary value raise
    :class:`ClassParseError`.
    """
    text = raw.strip()
    if not text:
        raise _malformed(raw, "Empty class")
    if any(ch.isspace() for ch in text):
        raise _malformed(raw, f"Class {raw!r} contains whitespace", fix="Split it into separate classes.")

    *prefixes, base = split_variants(text)
    diagnostics: list[Diagnostic] = []
    specs: list[VariantSpec] = []
    for segment in prefixes:
        spec = variants.lookup(segment)
        if spec is None:
            diagnostics.append(
                Diagnostic.of(
                    DiagnosticKind.UNKNOWN_VARIANT,
                    f"Unknown variant {segment!r} ignored",
                    token=raw,
                )
            )
            continue
        specs.append(spec)

    if not base:
        raise _malformed(raw, f"Class {raw!r} has variants but no utility")

    body = base
    important = False
    if body.startswith("!"):
        important, body = True, body[1:]
    elif body.endswith("!"):
        important, body = True, body[:-1]

    negative = body.startswith("-")
    if negative:
        body = body[1:]

    value: ValueSpec = NO_VALUE
    base_name = ""
    opacity: int | None = None

    slash = body.rfind("/")
    if slash > body.rfind("]"):
        head, modifier = body[:slash], body[slash + 1 :]
        fraction = _split_fraction(head, modifier)
        if fraction is not None:
            base_name, value = fraction
        else:
            if modifier.isdigit() and 0 <= int(modifier) <= 100:
                opacity = int(modifier)
            else:
                diagnostics.append(
                    Diagnostic.of(
                        DiagnosticKind.INVALID_OPACITY_MODIFIER,
                        f"Opacity modifier '/{modifier}' must be an integer 0-100; "
                        "using the opaque value",
                        token=raw,
                    )
                )
            body = head

    if not base_name:
        if body.endswith("]"):
            idx = body.find("-[")
            if idx <= 0:
                raise _malformed(raw, f"Arbitrary value in {raw!r} has no utility name")
            inner = body[idx + 2 : -1]
            try:
                validate_arbitrary(inner)
            except MalformedValueError as exc:
                raise ClassParseError(
                    Diagnostic.of(
                        DiagnosticKind.MALFORMED_ARBITRARY_VALUE,
                        str(exc),
                        token=raw,
                        fix="Arbitrary values may only contain numbers, units, %, #, "
                        "identifiers, calc()/var() style calls and _ for spaces.",
                    )
                ) from exc
            base_name, value = body[:idx], ValueSpec.arbitrary(inner)
        elif "[" in body:
            raise _malformed(raw, f"Arbitrary value in {raw!r} must end the class")
        else:
            name, sep, scale = body.rpartition("-")
            if sep and name and scale:
                base_name, value = name, ValueSpec.scale(scale)
            else:
                base_name = body

    if not base_name or base_name.startswith("-") or base_name.endswith("-"):
        raise _malformed(raw, f"Class {raw!r} has no utility name")

    token = ClassToken(
        raw=raw,
        base=base,
        variants=tuple(specs),
        base_name=base_name,
        value=value,
        negative=negative,
        important=important,
        opacity=opacity,
    )
    return ParsedClass(token=token, diagnostics=tuple(diagnostics))
