"""
Request template and document renderer.

Render the built-in integration request templates (Velocity documents) with
Jinja2, and serialize a compiled TemplateDocument.
"""

import json
from functools import lru_cache
from pathlib import Path

import yaml
from jinja2 import Environment, FileSystemLoader

TEMPLATE_DIR = Path(__file__).parent / "templates"

# Request parts copied into the envelope, in output order.
ENVELOPE_SECTIONS = [
    ("headers", "$input.params().header"),
    ("query", "$input.params().querystring"),
    ("path", "$input.params().path"),
    ("identity", "$context.identity"),
    ("stageVariables", "$stageVariables"),
]


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


@lru_cache(maxsize=None)
def render_request_template(form_urlencoded: bool = False) -> str:
    """
    Render the default request template.

    Args:
        form_urlencoded: decode an application/x-www-form-urlencoded body
            into a JSON object instead of passing the JSON body through

    Returns:
        Velocity template string
    """
    template = _environment().get_template("request.vtl.j2")
    return template.render(
        form_urlencoded=form_urlencoded,
        body_expression="$body" if form_urlencoded else '$input.json("$")',
        sections=ENVELOPE_SECTIONS,
    )


def render_document(document: dict, output_format: str = "json") -> str:
    """
    Serialize a compiled document.

    Args:
        document: {"Resources": {...}, "MethodDependencies": [...]}
        output_format: "json" or "yaml"
    """
    if output_format == "yaml":
        return yaml.safe_dump(document, sort_keys=False, default_flow_style=False)
    return json.dumps(document, indent=2) + "\n"
