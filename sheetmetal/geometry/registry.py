"""
Resolver registry: maps each Template to its resolver function.

Adding a template means one resolver here plus one placeholder entry in
resolver.py and its pricing-table rows.
"""

from ..models import Template
from .circle import resolve_circle
from .rectangle import resolve_rectangle
from .triangle import resolve_triangle

RESOLVER_REGISTRY = {
    Template.RECTANGLE: resolve_rectangle,
    Template.RECT_HOLES: resolve_rectangle,
    Template.CIRCLE: resolve_circle,
    Template.TRIANGLE_HOLES: resolve_triangle,
}


def get_resolver(template: Template):
    """Returns the resolver function for a template, or raises ValueError."""
    if template not in RESOLVER_REGISTRY:
        raise ValueError(
            f"No resolver registered for template: {template}. "
            f"Available: {[t.value for t in RESOLVER_REGISTRY]}"
        )
    return RESOLVER_REGISTRY[template]


def has_resolver(template: Template) -> bool:
    return template in RESOLVER_REGISTRY


def list_templates() -> list:
    return list(RESOLVER_REGISTRY.keys())
