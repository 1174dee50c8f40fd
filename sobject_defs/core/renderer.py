"""
renderer.py — Render a faux Apex class for one SObject.

Pure text templating.  Output is deterministic: identical describe input
gives byte-identical output, and fields keep their describe order.
"""
from __future__ import annotations

from sobject_defs.core.models import FieldDescriptor, ObjectDescription
from sobject_defs.core.type_map import map_to_stub_type

STUB_EXTENSION = ".cls"
INDENT = "    "


def render_field(field: FieldDescriptor) -> list[str]:
    """Return the declaration line, preceded by a label comment when present."""
    stub_type = map_to_stub_type(field.type, field.reference_to)
    lines = []
    if field.label:
        lines.append(f"{INDENT}// {field.label}")
    lines.append(f"{INDENT}global {stub_type} {field.name};")
    return lines


def render_stub(description: ObjectDescription) -> str:
    """Render the complete stub class for *description*."""
    lines = [
        "// This file is generated as an Apex representation of the",
        f"//     {description.label}",
        "// standard object in your org.",
        "// This file is used for language services by the Apex Language Server.",
        "",
        f"global class {description.name} {{",
    ]
    for field in description.fields:
        lines.extend(render_field(field))
    lines.append("")
    lines.append(f"{INDENT}global {description.name}() {{ }}")
    lines.append("}")
    return "\n".join(lines)
