"""Render the Jinja2 file templates shipped beside a generator."""

import importlib.resources

import jinja2


def _environment():
    return jinja2.Environment(
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
        autoescape=False,
    )


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Render ``<package>.templates/<template_name>`` as file content.

    Output is written to disk verbatim, so the template's final newline is
    kept and an unknown variable raises ``jinja2.UndefinedError`` instead of
    rendering as an empty string. A missing template raises FileNotFoundError.
    """
    source = importlib.resources.files(f"{package}.templates").joinpath(template_name)
    return _environment().from_string(source.read_text(encoding="utf-8")).render(**kwargs)
