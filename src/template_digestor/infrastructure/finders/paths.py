"""Path helpers shared by the template finders."""

from __future__ import annotations


def template_path(name: str, partial: bool) -> str:
    """Map a logical name to its storage path.

    Partials live under an underscore-prefixed leaf:
    ``("topics/topic", True)`` → ``"topics/_topic"``.
    """
    if not partial:
        return name
    head, _, leaf = name.rpartition("/")
    leaf = f"_{leaf}"
    return f"{head}/{leaf}" if head else leaf
