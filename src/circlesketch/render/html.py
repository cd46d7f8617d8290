"""Rendering of a computed sketch into HTML.

Two documents are produced from the same sketch: a standalone page with
controls for live editing, and a ``<div>`` fragment meant to be pasted
into another page. Both carry the geometry, the coefficients and the
precomputed loop list as JSON; the page only recomputes loops when the
user edits the schedule text.
"""

import html
import json
from typing import Any

from circlesketch.config.settings import (
    AlwaysVisible,
    CongruenceVisible,
    NeverVisible,
    RenderConfig,
)
from circlesketch.domain.sketch import Sketch
from circlesketch.render.templates import (
    ANIMATION_SCRIPT,
    EMBED_TEMPLATE,
    PAGE_STYLE,
    PAGE_TEMPLATE,
    SCHEDULE_SCRIPT,
    SKETCH_TEMPLATE,
    STYLE,
)
from circlesketch.utils.numbers import format_number

DEFAULT_SKETCH_ID = "circles-sketch"

# Stroke width sliders span this range, relative to the configured width
WIDTH_SLIDER_FACTOR = 5.0


def sketch_data(sketch: Sketch, config: RenderConfig) -> dict[str, Any]:
    """Collect everything the page script needs.

    Args:
        sketch: Computed sketch
        config: Render configuration the sketch was built with

    Returns:
        JSON-serializable mapping
    """
    return {
        "points": sketch.contour.to_tuples(),
        "coefficients": sketch.decomposition.to_list(),
        "loops": [loop.to_list() for loop in sketch.loops],
        "ranges": [r.model_dump(by_alias=True) for r in config.steps.ranges],
        "cap": sketch.cap,
        "predicates": {
            "contour": config.show_contour.model_dump(),
            "trace": config.show_trace.model_dump(),
            "circles": config.show_fourier_circles.model_dump(),
        },
        "dotR": sketch.view_box.dot_radius,
        "display": {
            "trace_length": config.trace_length,
            "opacity": config.opacity,
            "trace_colors": list(config.trace_colors),
            "show_point": config.show_point,
            "show_nh": config.show_nh,
        },
    }


def script_json(data: Any) -> str:
    """Serialize data for inlining in a ``<script>`` element."""
    return json.dumps(data, separators=(",", ":")).replace("</", "<\\/")


def format_command(command: str) -> str:
    """Escape a command line for HTML and start each flag on a new line.

    Examples:
        >>> format_command("circles-sketch text Hi --font Arial -o out")
        'circles-sketch text Hi<br/>--font Arial<br/>-o out'
    """
    pieces = []
    for word in html.escape(command).split():
        if pieces and word.startswith("-"):
            pieces.append("<br/>")
        elif pieces:
            pieces.append(" ")
        pieces.append(word)
    return "".join(pieces)


def visibility_options(
    predicate: AlwaysVisible | NeverVisible | CongruenceVisible,
) -> str:
    """Build ``<option>`` elements for a visibility selector.

    A configured congruence gets its own option so the user can switch
    back to it after trying always/never.
    """
    options = []
    if isinstance(predicate, CongruenceVisible):
        residues = ", ".join(str(r) for r in predicate.residues)
        label = html.escape(f"loop mod {predicate.modulo} in [{residues}]")
        options.append(f'<option value="configured" selected>{label}</option>')
    for kind in ("always", "never"):
        selected = " selected" if predicate.kind == kind else ""
        options.append(f'<option value="{kind}"{selected}>{kind}</option>')
    return "".join(options)


def coefficient_rows(sketch: Sketch, limit: int | None = None) -> str:
    rows = []
    for index, c in enumerate(sketch.decomposition):
        if limit is not None and index >= limit:
            break
        rows.append(
            f"<tr><td>{index}</td><td>{c.freq}</td><td>{c.re:.6g}</td>"
            f"<td>{c.im:.6g}</td><td>{c.radius:.6g}</td></tr>"
        )
    return "\n".join(rows)


def _render_sketch(sketch: Sketch, config: RenderConfig, sketch_id: str) -> str:
    vb = sketch.view_box
    return SKETCH_TEMPLATE.substitute(
        sketch_id=sketch_id,
        view_box=" ".join(format_number(v) for v in (vb.x, vb.y, vb.size, vb.size)),
        svg_path=sketch.svg_path,
        contour_width=format_number(config.contour_width),
        trace_width=format_number(config.trace_width),
        opacity=format_number(config.opacity),
        dot_r=format_number(vb.dot_radius),
        label_x=format_number(vb.x + vb.size * 0.02),
        label_y=format_number(vb.y + vb.size * 0.06),
        label_size=format_number(vb.size * 0.04),
    )


def render_embed(
    sketch: Sketch,
    config: RenderConfig,
    sketch_id: str = DEFAULT_SKETCH_ID,
) -> str:
    """Render the embeddable fragment.

    Args:
        sketch: Computed sketch
        config: Render configuration
        sketch_id: DOM id of the container, unique within the host page

    Returns:
        HTML fragment with its own style and script
    """
    return EMBED_TEMPLATE.substitute(
        sketch=_render_sketch(sketch, config, sketch_id),
        style=STYLE,
        schedule_script=SCHEDULE_SCRIPT,
        animation_script=ANIMATION_SCRIPT,
        data=script_json(sketch_data(sketch, config)),
        sketch_id=sketch_id,
    )


def render_page(
    sketch: Sketch,
    config: RenderConfig,
    command: str | None = None,
    title: str = "Drawing with circles",
) -> str:
    """Render the standalone page with its controls.

    Args:
        sketch: Computed sketch
        config: Render configuration
        command: Command line that generated the page, shown at the bottom
        title: Document title

    Returns:
        Complete HTML document
    """
    width_max = max(config.trace_width, config.contour_width) * WIDTH_SLIDER_FACTOR
    return PAGE_TEMPLATE.substitute(
        title=html.escape(title),
        style=STYLE,
        page_style=PAGE_STYLE,
        sketch=_render_sketch(sketch, config, DEFAULT_SKETCH_ID),
        schedule_text=html.escape(sketch.schedule_text, quote=True),
        contour_options=visibility_options(config.show_contour),
        trace_options=visibility_options(config.show_trace),
        circles_options=visibility_options(config.show_fourier_circles),
        opacity=format_number(config.opacity),
        trace_length=format_number(config.trace_length),
        trace_width=format_number(config.trace_width),
        contour_width=format_number(config.contour_width),
        width_min="0",
        width_max=format_number(width_max),
        width_step=format_number(width_max / 100),
        show_point_checked=" checked" if config.show_point else "",
        show_nh_checked=" checked" if config.show_nh else "",
        coefficient_rows=coefficient_rows(sketch, limit=sketch.cap),
        command=format_command(command) if command else "",
        schedule_script=SCHEDULE_SCRIPT,
        animation_script=ANIMATION_SCRIPT,
        data=script_json(sketch_data(sketch, config)),
        sketch_id=DEFAULT_SKETCH_ID,
    )
