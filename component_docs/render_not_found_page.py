"""Logic for rendering the page shown when a type is not documented."""


def render_not_found_page(type_name: str, api_root: str) -> str:
    """Render a Markdown page for a type name with no descriptor."""
    parts = [
        "# Type not found",
        "",
        f"No documentation exists for `{type_name}`.",
        "",
        f"- Browse the API under `{api_root}`",
    ]
    return "\n".join(parts) + "\n"
