"""Textual CSS output for a :class:`Stylesheet`."""

from __future__ import annotations

from itertools import groupby

from zephyr.model.rule import Keyframes, Rule, Stylesheet


def _block(rule: Rule, indent: str, minify: bool) -> str:
    if minify:
        body = ";".join(
            f"{p.name}:{p.value}{'!important' if p.important else ''}" for p in rule.properties
        )
        return f"{rule.selector}{{{body}}}"
    lines = [f"{indent}{rule.selector} {{"]
    lines.extend(f"{indent}  {p};" for p in rule.properties)
    lines.append(f"{indent}}}")
    return "\n".join(lines)


def _declarations(body: str) -> list[tuple[str, str]]:
    pairs = []
    for chunk in body.split(";"):
        name, sep, value = chunk.partition(":")
        if sep:
            pairs.append((name.strip(), value.strip()))
    return pairs


def _keyframes(block: Keyframes, minify: bool) -> str:
    if minify:
        steps = "".join(
            step.replace(", ", ",")
            + "{"
            + ";".join(f"{n}:{v}" for n, v in _declarations(body))
            + "}"
            for step, body in block.steps
        )
        return f"@keyframes {block.name}{{{steps}}}"
    lines = [f"@keyframes {block.name} {{"]
    for step, body in block.steps:
        lines.append(f"  {step} {{")
        lines.extend(f"    {n}: {v};" for n, v in _declarations(body))
        lines.append("  }")
    lines.append("}")
    return "\n".join(lines)


def render_css(stylesheet: Stylesheet, minify: bool = False) -> str:
    """Render keyframes first, then rules, grouping consecutive rules by media query."""
    chunks = [_keyframes(k, minify) for k in stylesheet.keyframes]
    for media, group in groupby(stylesheet.rules, key=lambda r: r.media):
        rules = list(group)
        if media is None:
            chunks.extend(_block(r, "", minify) for r in rules)
        elif minify:
            inner = "".join(_block(r, "", True) for r in rules)
            chunks.append(f"@media {media}{{{inner}}}")
        else:
            inner = "\n".join(_block(r, "  ", False) for r in rules)
            chunks.append(f"@media {media} {{\n{inner}\n}}")
    if minify:
        return "".join(chunks)
    return "\n\n".join(chunks) + ("\n" if chunks else "")
