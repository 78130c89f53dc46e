"""
Diagram template names.

Constants only; the loader owns every file system concern.
"""

TEMPLATE_SUFFIX = ".jinja2"


class Template:
    """Names of the packaged diagram templates, without suffix."""

    STATE_DIAGRAM = "state_diagram"

    @classmethod
    def all(cls) -> list:
        return [
            value
            for name, value in vars(cls).items()
            if name.isupper() and isinstance(value, str)
        ]
